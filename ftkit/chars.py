"""Classification and case conversion of single ASCII characters.

Each function takes either a one-character string or an integer code.
The predicates return a bool. The converters return a value of the same
kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) < 128


def is_print(c: CharLike) -> bool:
    """True for the printable ASCII codes, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _like(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _like(c, code)