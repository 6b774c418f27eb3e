from __future__ import annotations

from .date.types import DateValue


def is_date(value: object) -> bool:
    """True only for a valid DateValue (the invalid sentinel is rejected).

    Parsing never raises, so callers that need strict input use this after parse_date().
    """
    return isinstance(value, DateValue) and value.is_valid
