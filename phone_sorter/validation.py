"""NANP plausibility checks for normalized ten digit numbers."""
from __future__ import annotations

from .normalize import NUMBER_LENGTH

_SEQUENTIAL = "1234567890"
_INVALID_LEADING_DIGITS = frozenset("01")


def is_valid_area_code(area_code: str) -> bool:
    """Structural NPA check: three digits, the first of which is 2-9.

    Codes missing from the area code directory still pass; they classify as
    ``Unknown`` rather than invalid.
    """

    return len(area_code) == 3 and area_code.isdigit() and area_code[0] not in _INVALID_LEADING_DIGITS


def _all_same_digit(digits: str) -> bool:
    return len(set(digits)) == 1


def _is_repeated_triplet(digits: str) -> bool:
    # Whole-string match of one three digit group repeated three times, so only
    # a nine character string can ever match.
    return len(digits) == 9 and digits[0:3] == digits[3:6] == digits[6:9]


def is_valid_us_number(digits: str) -> bool:
    """Return ``True`` when ``digits`` is a plausible US telephone number."""

    if len(digits) != NUMBER_LENGTH or not digits.isascii() or not digits.isdigit():
        return False
    if digits[0] in _INVALID_LEADING_DIGITS:
        return False
    if not is_valid_area_code(digits[0:3]):
        return False
    if digits[3] in _INVALID_LEADING_DIGITS:
        return False
    if _all_same_digit(digits) or digits == _SEQUENTIAL or _is_repeated_triplet(digits):
        return False
    return True


__all__ = ["is_valid_us_number", "is_valid_area_code"]
