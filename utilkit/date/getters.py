from __future__ import annotations

import math
from collections.abc import Callable

from .parsers import parse_date
from .types import DateInput


def _getter(field: str, *, utc: bool) -> Callable[..., int | float]:
    def get(value: DateInput | None = None) -> int | float:
        d = parse_date(value)
        fields = d.utc_fields() if utc else d.local_fields()
        if fields is None:
            return math.nan
        return getattr(fields, field)

    view = "UTC" if utc else "local"
    get.__name__ = f"get_{field}{'_utc' if utc else ''}"
    get.__doc__ = f"Return the {view} {field} of value (now when omitted); NaN for an invalid date."
    return get


get_milliseconds = _getter("milliseconds", utc=False)
get_milliseconds_utc = _getter("milliseconds", utc=True)
get_seconds = _getter("seconds", utc=False)
get_seconds_utc = _getter("seconds", utc=True)
get_minutes = _getter("minutes", utc=False)
get_minutes_utc = _getter("minutes", utc=True)
get_hours = _getter("hours", utc=False)
get_hours_utc = _getter("hours", utc=True)
# Day of month, 1-31.
get_day = _getter("day", utc=False)
get_day_utc = _getter("day", utc=True)
# Zero-based: January is 0.
get_month = _getter("month", utc=False)
get_month_utc = _getter("month", utc=True)
get_year = _getter("year", utc=False)
get_year_utc = _getter("year", utc=True)
