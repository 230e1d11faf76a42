import string

import pytest

from ftkit.chars import (
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


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", list("!@ #-_~\t"))
def test_punctuation_is_not_alnum(ch):
    assert is_alnum(ch) is False


def test_classifiers_accept_int_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("[")) is False


def test_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_case_round_trip(ch):
    upper = to_upper(ch)
    assert upper == ch.upper()
    assert to_lower(upper) == ch


def test_case_conversion_leaves_others_unchanged():
    for ch in "09 !{":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("b")) == ord("B")
    assert to_lower(ord("B")) == ord("b")
    assert to_upper(200) == 200


def test_bad_character_arguments():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_atoi_basic():
    assert atoi("42") == 42
    assert atoi("  \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0
    assert atoi("- 5") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("123 456") == 123


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 10**20])
def test_itoa_atoi_round_trip(n):
    text = itoa(n)
    assert atoi(text) == n
    assert text == str(n)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")