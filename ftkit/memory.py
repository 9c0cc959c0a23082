"""Byte-buffer operations over bytes-like objects.

Mutating functions work in place on a writable buffer (bytearray or
memoryview) and return it. Counts that reach past a buffer raise
IndexError instead of touching memory out of bounds.
"""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer, value: int, count: int):
    """Fill the first count bytes of buffer with value (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer, count: int) -> None:
    """Set the first count bytes of buffer to zero."""
    memset(buffer, 0, count)


def memcpy(dest, src, count: int):
    """Copy count bytes from src to the start of dest."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(dest, src, count: int):
    """Copy count bytes from src to dest; the two may overlap."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memchr(data, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to value within the first count bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, count: int) -> int:
    """Difference of the first unequal bytes within count bytes, or 0."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(total)