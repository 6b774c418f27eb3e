"""Date parsing, field access, arithmetic, differences and formatting.

Every function takes an optional date input (DateValue, datetime, ISO-8601
string or epoch-ms number) and treats a missing one as "now". Results are new
DateValue instances; nothing is mutated in place.
"""

from .clock import frozen_clock, now_ms, set_clock
from .difference import date_difference, difference_today_and_another_date
from .formatters import (
    format_date,
    format_day_utc,
    format_hours_utc,
    format_milliseconds_utc,
    format_minutes_utc,
    format_month_utc,
    format_seconds_utc,
    format_year_utc,
    get_date_formatted,
    get_format_custom,
    get_time_formatted,
)
from .getters import (
    get_day,
    get_day_utc,
    get_hours,
    get_hours_utc,
    get_milliseconds,
    get_milliseconds_utc,
    get_minutes,
    get_minutes_utc,
    get_month,
    get_month_utc,
    get_seconds,
    get_seconds_utc,
    get_year,
    get_year_utc,
)
from .manipulators import (
    manipulate_date,
    manipulate_days,
    manipulate_days_utc,
    manipulate_hours,
    manipulate_hours_utc,
    manipulate_milliseconds,
    manipulate_milliseconds_utc,
    manipulate_minutes,
    manipulate_minutes_utc,
    manipulate_months,
    manipulate_months_utc,
    manipulate_seconds,
    manipulate_seconds_utc,
    manipulate_years,
    manipulate_years_utc,
)
from .parsers import get_date, parse_date
from .patterns import DEFAULT_PATTERN, DateShape, TimeShape
from .types import DateFields, DateOptions, DateUnit, DateValue, FormatStyle, InvalidUnitError, OptionsDate
