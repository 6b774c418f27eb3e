from __future__ import annotations

import math

from .civil import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from .clock import now_ms
from .parsers import parse_date
from .types import DateInput, DateUnit, DateValue, InvalidUnitError

# Calendar-naive on purpose: a month is 30 days and a year is 12 such months.
UNIT_MS: dict[str, int] = {
    "milliseconds": 1,
    "seconds": MS_PER_SECOND,
    "minutes": MS_PER_MINUTE,
    "hours": MS_PER_HOUR,
    "days": MS_PER_DAY,
    "months": 30 * MS_PER_DAY,
    "years": 12 * 30 * MS_PER_DAY,
}


def unit_ms(unit: DateUnit | str) -> int:
    try:
        return UNIT_MS[unit]
    except (KeyError, TypeError):
        raise InvalidUnitError(unit, tuple(UNIT_MS)) from None


def _diff(a: DateValue, b: DateValue, unit: DateUnit | str | None) -> int | float:
    size = unit_ms(unit) if unit else 1
    if a.ms is None or b.ms is None:
        return math.nan
    return abs(b.ms - a.ms) // size


def date_difference(first: DateInput, second: DateInput, unit: DateUnit | None = None) -> int | float:
    """Absolute difference between two dates, floored to whole units.

    date_difference("2021-04-09", "2021-04-01", "days")  -> 8
    date_difference("2021-04-09", "2021-04-01")          -> 691200000

    Raises InvalidUnitError for a unit outside DateUnit. NaN if either date is invalid.
    """
    return _diff(parse_date(first), parse_date(second), unit)


def difference_today_and_another_date(value: DateInput, unit: DateUnit | None = None) -> int | float:
    """Same as date_difference() with now as the other date."""
    today = DateValue.from_ms(now_ms())
    return _diff(parse_date(value), today, unit)
