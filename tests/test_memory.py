import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert buf == bytearray(b"\xff" * 4)


def test_memset_zero_count_is_noop():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


def test_memcpy_copies_prefix():
    dest = bytearray(b"------")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc---")


def test_memcpy_negative_count_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), b"abc", -1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdefgh")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view[:6], 6)
    assert result is dest
    assert bytes(result) == b"abcdef"
    assert buf == bytearray(b"ababcdef")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdefgh")
    view = memoryview(buf)
    dest = view[:6]
    result = memmove(dest, view[2:], 6)
    assert result is dest
    assert bytes(result) == b"cdefgh"
    assert buf == bytearray(b"cdefghgh")


def test_memmove_src_too_short_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(8), b"ab", 3)


@pytest.mark.parametrize("target", [b"a", b"c", b"z", b"\x00"])
def test_memchr_agrees_with_find(target):
    data = b"abc\x00abc"
    found = memchr(data, target[0], len(data))
    expected = data.find(target)
    assert found == (None if expected < 0 else expected)


def test_memchr_respects_count():
    data = b"abcdef"
    assert memchr(data, ord("e"), 4) is None
    assert memchr(data, ord("e"), 5) == data.index(b"e")


def test_memchr_value_is_taken_modulo_256():
    data = b"\x01\x02"
    assert memchr(data, 0x102, 2) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_matches_byte_order():
    pairs = [(b"abc", b"abd"), (b"abd", b"abc"), (b"\x80", b"\x01"), (b"same", b"same")]
    for first, second in pairs:
        result = memcmp(first, second, len(first))
        assert (result > 0) == (first > second)
        assert (result < 0) == (first < second)


def test_memcmp_is_antisymmetric():
    assert memcmp(b"ab\xff", b"ab\x00", 3) == -memcmp(b"ab\x00", b"ab\xff", 3)


def test_memcmp_difference_of_bytes():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")


@pytest.mark.parametrize("count,size", [(0, 0), (1, 1), (4, 8), (10, 3)])
def test_calloc_is_zeroed_and_sized(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_buffer_is_writable():
    buf = calloc(2, 2)
    memset(buf, 7, 4)
    assert list(buf) == [7, 7, 7, 7]


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)
    with pytest.raises(MemoryError):
        calloc(2, SIZE_MAX)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)