"""Turn a raw input line into a :class:`ClassifiedRecord`."""
from __future__ import annotations

from .area_codes import lookup_state
from .models import STATUS_INVALID, STATUS_VALID, ClassifiedRecord, ProcessingOptions
from .normalize import normalize
from .validation import is_valid_us_number


def classify(raw_line: str, options: ProcessingOptions) -> ClassifiedRecord:
    cleaned = normalize(raw_line, options.strip_country_code)
    if is_valid_us_number(cleaned):
        area_code = cleaned[:3]
        return ClassifiedRecord(
            original=raw_line,
            cleaned=cleaned,
            status=STATUS_VALID,
            area_code=area_code,
            state=lookup_state(area_code),
        )
    return ClassifiedRecord(original=raw_line, cleaned=cleaned, status=STATUS_INVALID)


__all__ = ["classify"]
