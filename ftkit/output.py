"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text as it is."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    put_str(itoa(n), stream)