"""Unit tests for :mod:`phone_sorter.validation`."""
from __future__ import annotations

import pytest

from phone_sorter.validation import is_valid_area_code, is_valid_us_number


@pytest.mark.parametrize(
    "digits",
    ["6125544556", "2125551234", "9995551234", "2342342342", "8005551234"],
)
def test_accepts_plausible_numbers(digits: str) -> None:
    assert is_valid_us_number(digits)


@pytest.mark.parametrize(
    "digits, reason",
    [
        ("", "empty"),
        ("612554455", "nine digits"),
        ("61255445561", "eleven digits"),
        ("0125544556", "area code starts with 0"),
        ("1125544556", "area code starts with 1"),
        ("6120544556", "exchange starts with 0"),
        ("6121544556", "exchange starts with 1"),
        ("2222222222", "all the same digit"),
        ("9999999999", "all the same digit"),
        ("1234567890", "sequential"),
        ("612-554-45", "not all digits"),
    ],
)
def test_rejects_implausible_numbers(digits: str, reason: str) -> None:
    assert not is_valid_us_number(digits), reason


def test_repeated_triplet_only_matches_nine_digit_strings() -> None:
    # A ten digit number can never be exactly three repeats of one group.
    assert is_valid_us_number("2342342342")
    assert not is_valid_us_number("234234234")


@pytest.mark.parametrize("length", [0, 1, 5, 9, 11, 15])
def test_any_length_other_than_ten_is_invalid(length: int) -> None:
    assert not is_valid_us_number("6" * length)
    assert not is_valid_us_number(("6125544556" * 2)[:length])


def test_area_code_structure() -> None:
    assert is_valid_area_code("612")
    assert is_valid_area_code("999")
    assert not is_valid_area_code("012")
    assert not is_valid_area_code("112")
    assert not is_valid_area_code("61")
    assert not is_valid_area_code("6a2")
