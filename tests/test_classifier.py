"""Unit tests for :func:`phone_sorter.classifier.classify`."""
from __future__ import annotations

from phone_sorter.area_codes import UNKNOWN_STATE
from phone_sorter.classifier import classify
from phone_sorter.models import STATUS_INVALID, STATUS_VALID, ProcessingOptions


def test_valid_number_gets_area_code_and_state() -> None:
    record = classify("+1 (612) 554-4556", ProcessingOptions())

    assert record.status == STATUS_VALID
    assert record.is_valid
    assert record.original == "+1 (612) 554-4556"
    assert record.cleaned == "6125544556"
    assert record.area_code == "612"
    assert record.state == "Minnesota"


def test_invalid_number_has_no_area_code_or_state() -> None:
    record = classify("555-0100", ProcessingOptions())

    assert record.status == STATUS_INVALID
    assert record.cleaned == "5550100"
    assert record.area_code is None
    assert record.state is None


def test_unassigned_area_code_is_still_valid() -> None:
    record = classify("999-555-1234", ProcessingOptions())

    assert record.is_valid
    assert record.state == UNKNOWN_STATE


def test_as_row_flattens_missing_fields() -> None:
    row = classify("1234567890", ProcessingOptions()).as_row()

    assert row == {
        "original": "1234567890",
        "cleaned": "1234567890",
        "status": STATUS_INVALID,
        "area_code": "",
        "state": "",
    }
