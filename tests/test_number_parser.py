from __future__ import annotations

import pytest

from evensum.number_parser import parse_numbers


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1,2,3", [1, 2, 3]),
        ("1 2 3", [1, 2, 3]),
        ("1, 2 3,-4", [1, 2, 3, -4]),
        ("  5\t4\n3  ", [5, 4, 3]),
        ("1, 2, 3,", [1, 2, 3]),
        ("+7, -0", [7, 0]),
        ("42", [42]),
    ],
)
def test_parse_numbers_accepts_commas_and_whitespace(text, expected):
    assert parse_numbers(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_text_is_empty(text):
    assert parse_numbers(text) == []


def test_non_integer_token_is_rejected():
    with pytest.raises(ValueError, match=r"'x' at position 3"):
        parse_numbers("1, 2, x, 4")


def test_float_token_is_rejected():
    with pytest.raises(ValueError, match="2.5"):
        parse_numbers("1 2.5")


def test_empty_token_between_commas_is_rejected():
    with pytest.raises(ValueError, match="missing number at position 2"):
        parse_numbers("1,,2")


@pytest.mark.parametrize(
    "text,position",
    [(",1", 1), (",,,1", 1), ("1,,", 2), ("1, ,", 2), ("1,, ", 2)],
)
def test_empty_leading_or_repeated_trailing_entries_are_rejected(text, position):
    with pytest.raises(ValueError, match=f"missing number at position {position}"):
        parse_numbers(text)


def test_single_trailing_comma_is_allowed():
    assert parse_numbers("1, 2, ") == [1, 2]


@pytest.mark.parametrize("token", ["1_000", "١٢", "0x10", "١"])
def test_non_ascii_and_literal_forms_are_rejected(token):
    with pytest.raises(ValueError, match="is not an integer"):
        parse_numbers(f"2 {token}")
