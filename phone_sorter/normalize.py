"""Reduce free-form phone number text to a bare digit string."""
from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")

US_COUNTRY_CODE = "1"
NUMBER_LENGTH = 10


def normalize(raw: str, strip_country_code: bool = True) -> str:
    """Return the digits of ``raw`` trimmed to at most ten characters.

    Only ASCII digits survive. With ``strip_country_code`` an eleven digit
    string starting with ``1`` loses that leading digit; anything still longer
    than ten digits keeps its last ten. The result may be shorter than ten
    digits, so callers must validate the length.

    >>> normalize("+1 612-554-4556")
    '6125544556'
    >>> normalize("+1 612-554-4556", strip_country_code=False)
    '6125544556'
    >>> normalize("555-0100")
    '5550100'
    """

    digits = _NON_DIGITS.sub("", raw)
    if strip_country_code and len(digits) == NUMBER_LENGTH + 1 and digits.startswith(US_COUNTRY_CODE):
        digits = digits[1:]
    if len(digits) > NUMBER_LENGTH:
        digits = digits[-NUMBER_LENGTH:]
    return digits


__all__ = ["normalize", "NUMBER_LENGTH"]
