import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from strkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


def test_is_digit_matches_digit_set():
    found = {chr(c) for c in ASCII_CODES if is_digit(c)}
    assert found == set(string.digits)


def test_is_alpha_matches_letter_set():
    found = {chr(c) for c in ASCII_CODES if is_alpha(c)}
    assert found == set(string.ascii_letters)


def test_is_alnum_is_union_of_letters_and_digits():
    found = {chr(c) for c in ASCII_CODES if is_alnum(c)}
    assert found == set(string.ascii_letters + string.digits)


def test_is_print_matches_printable_without_control_whitespace():
    expected = set(string.printable) - set("\t\n\r\x0b\x0c")
    found = {chr(c) for c in ASCII_CODES if is_print(c)}
    assert found == expected


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_non_ascii_codes_are_not_classified():
    for code in (128, 200, 255, 1000, -5):
        assert not is_alpha(code)
        assert not is_digit(code)
        assert not is_print(code)


def test_string_and_int_forms_agree():
    for code in ASCII_CODES:
        ch = chr(code)
        assert is_alnum(ch) == is_alnum(code)
        assert is_print(ch) == is_print(code)


def test_to_lower_and_upper_match_str_methods_for_ascii():
    for code in ASCII_CODES:
        ch = chr(code)
        assert to_lower(ch) == ch.lower()
        assert to_upper(ch) == ch.upper()


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_non_ascii_letters_are_unchanged():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"


@given(st.integers(min_value=-1000, max_value=1000))
def test_case_round_trip_on_letters(code):
    if is_alpha(code):
        assert to_upper(to_lower(code)) == to_upper(code)
        assert is_alpha(to_lower(code))
    else:
        assert to_lower(code) == code
        assert to_upper(code) == code


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)