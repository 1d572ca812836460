import string

import pytest

from minitalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_alpha(ord(ch)) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_str_isprintable(ch):
    assert is_print(ch) == ch.isprintable()


def test_is_print_excludes_del_and_includes_space():
    assert is_print(" ") is True
    assert is_print(127) is False
    assert is_print(31) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_non_ascii_characters_are_not_classified():
    assert is_ascii("é") is False
    assert is_alpha("é") is False
    assert is_digit("٣") is False
    assert is_print("é") is False


def test_is_alnum_reduces_int_to_byte():
    assert is_alnum(256 + ord("a")) is True
    assert is_alnum(256 + ord(" ")) is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_upper_then_lower_round_trip(ch):
    upper = to_upper(ch)
    assert upper == ch.upper()
    assert to_lower(upper) == ch


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_lower_matches_str_lower(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_int_conversion_agrees_with_str_conversion(ch):
    assert to_upper(ord(ch)) == ord(to_upper(ch))
    assert to_lower(ord(ch)) == ord(to_lower(ch))


def test_case_conversion_keeps_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)