import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]
EXTENDED = [chr(i) for i in range(128, 300)]


@pytest.mark.parametrize("c", ASCII + EXTENDED)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c.isascii() and c.isalpha())


@pytest.mark.parametrize("c", ASCII + EXTENDED)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in "0123456789")


@pytest.mark.parametrize("c", ASCII + EXTENDED)
def test_is_alnum_is_union(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


@pytest.mark.parametrize("c", ASCII)
def test_is_print_matches_printable(c):
    assert is_print(c) == c.isprintable()


def test_is_print_edges():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print("\x7f")
    assert not is_print("\n")


@pytest.mark.parametrize("c", ASCII)
def test_to_upper_matches_str_upper(c):
    assert to_upper(c) == c.upper()


@pytest.mark.parametrize("c", ASCII)
def test_to_lower_matches_str_lower(c):
    assert to_lower(c) == c.lower()


def test_converters_leave_non_ascii_alone():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_converters_keep_integer_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("5")) == ord("5")


@pytest.mark.parametrize("c", ASCII)
def test_case_round_trip_on_letters(c):
    if is_alpha(c):
        assert to_lower(to_upper(c)) == c.lower()
        assert to_upper(to_lower(c)) == c.upper()
    else:
        assert to_upper(c) == c and to_lower(c) == c


def test_integer_and_string_agree():
    for c in ASCII:
        assert is_alpha(c) == is_alpha(ord(c))
        assert is_print(c) == is_print(ord(c))


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.0)
    with pytest.raises(TypeError):
        to_lower(None)