from __future__ import annotations

from datetime import date

from ..numbers import pad_number
from ..settings import local_zone
from .civil import DateFields, offset_ms
from .parsers import parse_date
from .patterns import render_date_token, render_pattern, render_time_token
from .types import INVALID_DATE, DateInput, DateValue, FormatStyle

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _weekday(f: DateFields) -> str:
    return WEEKDAYS[date(f.year, f.month + 1, f.day).weekday()]


def _hms(f: DateFields) -> str:
    return f"{pad_number(f.hours, 2)}:{pad_number(f.minutes, 2)}:{pad_number(f.seconds, 2)}"


def _clock12(f: DateFields) -> str:
    h = f.hours % 12 or 12
    suffix = "AM" if f.hours < 12 else "PM"
    return f"{h}:{pad_number(f.minutes, 2)}:{pad_number(f.seconds, 2)} {suffix}"


def _time_string(d: DateValue) -> str:
    zone = local_zone()
    f = d.local_fields(zone)
    off = offset_ms(d.ms, zone) // 60_000
    sign = "-" if off < 0 else "+"
    hh, mm = divmod(abs(off), 60)
    name = d.to_datetime(zone).tzname() or ""
    return f"{_hms(f)} GMT{sign}{pad_number(hh, 2)}{pad_number(mm, 2)} ({name})"


def _utc_string(d: DateValue) -> str:
    f = d.utc_fields()
    return f"{_weekday(f)}, {pad_number(f.day, 2)} {MONTHS[f.month]} {pad_number(f.year, 4)} {_hms(f)} GMT"


def _date_string(d: DateValue) -> str:
    f = d.local_fields()
    return f"{_weekday(f)} {MONTHS[f.month]} {pad_number(f.day, 2)} {pad_number(f.year, 4)}"


def _iso_string(d: DateValue) -> str:
    f = d.utc_fields()
    return (
        f"{pad_number(f.year, 4)}-{pad_number(f.month + 1, 2)}-{pad_number(f.day, 2)}"
        f"T{_hms(f)}.{pad_number(f.milliseconds, 3)}Z"
    )


def _locale_string(d: DateValue) -> str:
    f = d.local_fields()
    return f"{f.month + 1}/{f.day}/{f.year}, {_clock12(f)}"


def _locale_time_string(d: DateValue) -> str:
    return _clock12(d.local_fields())


_STYLES = {
    "time": _time_string,
    "utc": _utc_string,
    "date": _date_string,
    "iso": _iso_string,
    "locale": _locale_string,
    "locale-time": _locale_time_string,
}


def format_date(style: FormatStyle | str, value: DateInput | None = None, pattern: str | None = None) -> str:
    """Render a date in one of the whole-date styles.

    "custom" renders pattern (see utilkit.date.patterns); an unknown style falls
    back to the default "YYYY-MM-DD HH:MM:SS" pattern. Invalid dates render as
    "Invalid Date".
    """
    d = parse_date(value)
    if not d.is_valid:
        return INVALID_DATE
    if style == "custom":
        return get_format_custom(d, pattern)
    fn = _STYLES.get(style)
    if fn is None:
        return render_pattern(d.local_fields())
    return fn(d)


def get_format_custom(value: DateInput | None = None, pattern: str | None = None) -> str:
    d = parse_date(value)
    if not d.is_valid:
        return INVALID_DATE
    return render_pattern(d.local_fields(), pattern)


def get_time_formatted(value: DateInput | None = None, token: str | None = None) -> str:
    """Local time part for a token such as "HH:MM" or "HH:MM:SSZ"; "" when unrecognized."""
    d = parse_date(value)
    if not d.is_valid:
        return INVALID_DATE
    return render_time_token(d.local_fields(), token)


def get_date_formatted(value: DateInput | None = None, token: str | None = None) -> str:
    """Local date part for a token such as "YYYY-MM-DD" or "DD/MM"; "" when unrecognized."""
    d = parse_date(value)
    if not d.is_valid:
        return INVALID_DATE
    return render_date_token(d.local_fields(), token)


def _utc_field(value: DateInput | None, field: str, width: int) -> str:
    f = parse_date(value).utc_fields()
    if f is None:
        return "NaN"
    n = getattr(f, field) + (1 if field == "month" else 0)
    return pad_number(n, width) if width else str(n)


def format_year_utc(value: DateInput | None = None) -> str:
    return _utc_field(value, "year", 0)


def format_month_utc(value: DateInput | None = None) -> str:
    """1-based, two digits."""
    return _utc_field(value, "month", 2)


def format_day_utc(value: DateInput | None = None) -> str:
    return _utc_field(value, "day", 2)


def format_hours_utc(value: DateInput | None = None) -> str:
    return _utc_field(value, "hours", 2)


def format_minutes_utc(value: DateInput | None = None) -> str:
    return _utc_field(value, "minutes", 2)


def format_seconds_utc(value: DateInput | None = None) -> str:
    return _utc_field(value, "seconds", 2)


def format_milliseconds_utc(value: DateInput | None = None) -> str:
    """Unpadded: 5 ms renders as "5"."""
    return _utc_field(value, "milliseconds", 0)
