import string

import pytest

from wolfmaze.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", range(-5, 300))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code < 128)


@pytest.mark.parametrize("code", range(128))
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


def test_classification_accepts_strings():
    assert is_alpha("q")
    assert not is_alpha("7")
    assert is_digit("7")
    assert is_print(" ")
    assert not is_print("\n")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_of_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_without_digits():
    assert atoi("--5") == atoi("")
    assert atoi("abc") == atoi("   ")


def test_atoi_wraps_like_32_bit():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -99999, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)