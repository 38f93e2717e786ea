import string

import pytest

from ftlib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


def test_alpha_only_in_ascii_letters():
    letters = {c for c in range(256) if is_alpha(c)}
    assert letters == {ord(ch) for ch in string.ascii_letters}


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False


@pytest.mark.parametrize(
    "code, expected", [(-1, False), (0, True), (127, True), (128, False)]
)
def test_is_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize(
    "code, expected", [(31, False), (32, True), (126, True), (127, False)]
)
def test_is_print_bounds(code, expected):
    assert is_print(code) is expected


def test_case_conversion_str():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"


def test_case_conversion_int():
    assert to_upper(ord("z")) == ord("Z")
    assert to_lower(ord("A")) == ord("a")


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_round_trip_lower(ch):
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_non_letters_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_non_ascii_unchanged():
    assert to_upper(300) == 300
    assert to_lower(-7) == -7


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)