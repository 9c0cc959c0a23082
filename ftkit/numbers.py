"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

from ftkit.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \f\n\r\t\v"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits yields 0.
    The result wraps around like a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]

    digits = []
    for ch in stripped:
        if not is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int32(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    magnitude = abs(n)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    return sign + "".join(reversed(digits))