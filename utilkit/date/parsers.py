from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta

from dateutil import parser as date_parser

from ..settings import local_zone
from .civil import EPOCH_NAIVE, EPOCH_UTC, DateFields, compose, local_to_utc_ms
from .clock import now_ms
from .types import DateInput, DateValue

log = logging.getLogger(__name__)

# ISO-8601 date-time string format: YYYY[-MM[-DD]][THH:mm[:ss[.sss]][Z|+HH:mm]]
ISO_RE = re.compile(
    r"^(?P<year>[+-]\d{6}|\d{4})"
    r"(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<frac>\d+))?)?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})?)?$"
)

# Missing fields in free-form strings ("Jun 15") are filled from here.
_LENIENT_DEFAULT = datetime(2001, 1, 1)

_ONE_MS = timedelta(milliseconds=1)


def _days_in_month(year: int, month: int) -> int:
    nxt = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return (nxt - date(year, month, 1)).days


def _parse_iso(text: str) -> DateValue | None:
    """Return the parsed value, an invalid value for out-of-range fields, or None if not ISO-shaped."""
    m = ISO_RE.match(text)
    if not m:
        return None

    year_tok = m.group("year")
    if year_tok == "-000000":
        return DateValue.invalid()
    year = int(year_tok)
    month = int(m.group("month") or 1)
    day = int(m.group("day") or 1)
    hour = int(m.group("hour") or 0)
    minute = int(m.group("minute") or 0)
    second = int(m.group("second") or 0)
    frac = m.group("frac") or ""
    millis = int((frac + "000")[:3])

    if not 1 <= year <= 9999 or not 1 <= month <= 12:
        return DateValue.invalid()
    if not 1 <= day <= _days_in_month(year, month):
        return DateValue.invalid()
    if minute > 59 or second > 59:
        return DateValue.invalid()
    if hour > 24 or (hour == 24 and (minute or second or millis)):
        return DateValue.invalid()

    fields = DateFields(year, month - 1, day, hour, minute, second, millis)

    # Date-only forms are UTC; date-time forms without an offset are local time.
    if m.group("hour") is None:
        return DateValue.from_ms(compose(fields))

    tz_tok = m.group("tz")
    if tz_tok is None:
        return DateValue.from_ms(compose(fields, local_zone()))

    ms = compose(fields)
    if ms is None:
        return DateValue.invalid()
    if tz_tok != "Z":
        sign = -1 if tz_tok[0] == "-" else 1
        off_h, off_m = int(tz_tok[1:3]), int(tz_tok[4:6])
        if off_h > 23 or off_m > 59:
            return DateValue.invalid()
        ms -= sign * (off_h * 60 + off_m) * 60_000
    return DateValue.from_ms(ms)


def _from_datetime(dt: datetime) -> DateValue:
    if dt.tzinfo is not None and dt.utcoffset() is not None:
        return DateValue.from_ms((dt - EPOCH_UTC) // _ONE_MS)
    local_ms = (dt.replace(tzinfo=None) - EPOCH_NAIVE) // _ONE_MS
    return DateValue.from_ms(local_to_utc_ms(local_ms, local_zone()))


def _parse_string(text: str) -> DateValue:
    s = text.strip()
    if not s:
        return DateValue.invalid()

    iso = _parse_iso(s)
    if iso is not None:
        return iso

    try:
        dt = date_parser.parse(s, default=_LENIENT_DEFAULT)
    except (ValueError, OverflowError) as e:
        log.debug("unparseable date string %r: %s", text, e)
        return DateValue.invalid()
    return _from_datetime(dt)


def _parse_number(value: int | float) -> DateValue:
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return DateValue.invalid()
        value = int(value)  # truncates toward zero
    return DateValue.from_ms(value)


def parse_date(value: DateInput | None = None) -> DateValue:
    """Normalize a date input into a DateValue.

    - None: now (read from the clock at call time)
    - DateValue: same instant
    - datetime: aware -> its instant; naive -> local wall time. A plain date is UTC midnight.
    - int/float: epoch milliseconds
    - str: exact ISO-8601, otherwise a lenient dateutil parse

    Unparseable input gives DateValue.invalid() rather than raising.
    """

    if value is None:
        return DateValue.from_ms(now_ms())
    if isinstance(value, DateValue):
        return DateValue.from_ms(value.ms)
    if isinstance(value, datetime):
        return _from_datetime(value)
    if isinstance(value, date):
        return DateValue.from_ms(compose(DateFields(value.year, value.month - 1, value.day, 0, 0, 0, 0)))
    if isinstance(value, bool):
        return DateValue.invalid()
    if isinstance(value, (int, float)):
        return _parse_number(value)
    if isinstance(value, str):
        return _parse_string(value)
    raise TypeError(f"Unsupported date input: {type(value).__name__}")


def get_date(value: DateInput | None = None) -> DateValue:
    """Return a DateValue for value, or for now when value is None."""
    return parse_date(value)
