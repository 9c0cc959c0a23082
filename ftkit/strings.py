"""String helpers with C-string semantics expressed through Python values.

Positions are returned as indices into the text rather than pointers.
A search for the NUL character finds the position just past the last
character, which is where a terminator would sit. Functions that would
write into a fixed-size C buffer return the resulting text together with
the length the C routine reports.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(ch: CharLike) -> str:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start past the end of text gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The concatenation of first and second."""
    return first + second


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove every leading and trailing character found in charset.

    With no charset the text is returned unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset) if charset else text


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on sep, dropping empty pieces.

    An empty text gives an empty list. A non-empty text made only of
    separators gives a list holding one empty string.
    """
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    words = [word for word in text.split(separator) if word]
    if not words and text:
        return [""]
    return words


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first occurrence of ch in text, or None.

    Searching for NUL gives len(text).
    """
    target = _char(ch)
    if target == _NUL:
        index = text.find(_NUL)
        return len(text) if index < 0 else index
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last occurrence of ch in text, or None.

    Searching for NUL gives len(text).
    """
    target = _char(ch)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the codes of the first differing characters,
    a missing character counting as code 0, or 0 if none differ.
    """
    _non_negative("n", n)
    for count, (a, b) in enumerate(zip_longest(first, second, fillvalue=_NUL)):
        if count >= n:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle lying wholly within the first length characters of haystack.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to size - 1 characters, and len(src).
    With size 0 nothing is copied.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters including the terminator.

    Returns the resulting text and the length of the string that was
    attempted: size + len(src) when size is less than len(dest), otherwise
    len(dest) + len(src).
    """
    _non_negative("size", size)
    if size < len(dest):
        return dest, size + len(src)
    room = max(size - 1 - len(dest), 0)
    return dest + src[:room], len(dest) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence,
    func: Callable[[int, object], object],
) -> MutableSequence:
    """Call func(index, item) for each item of a mutable sequence.

    A non-None value returned by func replaces the item in place. The
    sequence is returned.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement
    return text