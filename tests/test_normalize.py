"""Unit tests for :mod:`phone_sorter.normalize`."""
from __future__ import annotations

import pytest

from phone_sorter.normalize import normalize
from phone_sorter.validation import is_valid_us_number


def test_strips_formatting_and_country_code() -> None:
    assert normalize("+1 612-554-4556", strip_country_code=True) == "6125544556"


def test_country_code_dropped_by_truncation_when_not_stripping() -> None:
    assert normalize("+1 612-554-4556", strip_country_code=False) == "6125544556"


def test_keeps_last_ten_digits_of_long_input() -> None:
    assert normalize("(612) 554-4556 ext 12") == "2554455612"


def test_country_code_only_stripped_from_eleven_digits() -> None:
    assert normalize("1555-0100") == "15550100"


@pytest.mark.parametrize("raw", ["", "   ", "no digits here", "---"])
def test_returns_empty_string_without_digits(raw: str) -> None:
    assert normalize(raw) == ""


def test_ignores_non_ascii_digits() -> None:
    assert normalize("\uff16\uff11\uff125544556") == "5544556"


@pytest.mark.parametrize("number", ["6125544556", "2125551234", "4155550100"])
def test_normalizing_a_valid_number_is_idempotent(number: str) -> None:
    once = normalize(number)
    assert is_valid_us_number(once)
    assert normalize(once) == once
    assert normalize(once, strip_country_code=False) == once
