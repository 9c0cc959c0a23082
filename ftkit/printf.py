"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return int(value)


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 32-bit unsigned value."""
    return format(n & _UINT32_MASK, "X" if upper else "x")


def to_pointer(n: int) -> str:
    """Lower-case hexadecimal digits of n taken as a 64-bit address."""
    return format(n & _ULONG_MASK, "x")


def _convert(conversion: str, next_arg: Callable[[str], Any]) -> str:
    if conversion == "c":
        value = next_arg(conversion)
        if isinstance(value, str) and len(value) == 1:
            return value
        return chr(_int(value, conversion) & 0xFF)
    if conversion == "s":
        value = next_arg(conversion)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, got {type(value).__name__}")
        return value
    if conversion == "p":
        value = next_arg(conversion)
        return "0x" + to_pointer(0 if value is None else _int(value, conversion))
    if conversion in ("d", "i"):
        return str(_wrap_int32(_int(next_arg(conversion), conversion)))
    if conversion == "u":
        return str(_int(next_arg(conversion), conversion) & _UINT32_MASK)
    if conversion in ("x", "X"):
        return to_hex(_int(next_arg(conversion), conversion), conversion == "X")
    if conversion == "%":
        return "%"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args.

    An unknown conversion character is dropped along with its percent sign.
    """
    remaining = iter(args)

    def next_arg(conversion: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None

    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        parts.append(_convert(next(chars, ""), next_arg))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)