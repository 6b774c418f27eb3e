from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import NamedTuple

from dateutil import tz

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_NAIVE = datetime(1970, 1, 1)
_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

# One day of slack at both ends so any zone offset stays inside datetime's range.
MIN_MS = (date(1, 1, 2).toordinal() - _EPOCH_ORDINAL) * MS_PER_DAY
MAX_MS = (date(9999, 12, 31).toordinal() - _EPOCH_ORDINAL) * MS_PER_DAY - 1


class DateFields(NamedTuple):
    """Calendar/clock fields of one view of an instant. Month is 0-based."""

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


def in_range(ms: int) -> bool:
    return MIN_MS <= ms <= MAX_MS


def split_ms(ms: int) -> DateFields:
    days, rem = divmod(ms, MS_PER_DAY)
    d = date.fromordinal(_EPOCH_ORDINAL + days)
    hours, rem = divmod(rem, MS_PER_HOUR)
    minutes, rem = divmod(rem, MS_PER_MINUTE)
    seconds, millis = divmod(rem, MS_PER_SECOND)
    return DateFields(d.year, d.month - 1, d.day, hours, minutes, seconds, millis)


def join_fields(f: DateFields) -> int | None:
    """Rebuild epoch ms from fields, letting every field overflow into the next.

    Month 12 is January of the next year, day 0 is the last day of the previous
    month, hour 24 is midnight of the next day, and so on.
    """
    year = f.year + f.month // 12
    month = f.month % 12
    if not 1 <= year <= 9999:
        return None
    day = date(year, month + 1, 1).toordinal() - _EPOCH_ORDINAL + f.day - 1
    time = f.hours * MS_PER_HOUR + f.minutes * MS_PER_MINUTE + f.seconds * MS_PER_SECOND + f.milliseconds
    return day * MS_PER_DAY + time


def offset_ms(utc_ms: int, zone: tzinfo) -> int:
    """UTC offset of zone at the given instant, in ms."""
    aware = (EPOCH_UTC + timedelta(milliseconds=utc_ms)).astimezone(zone)
    off = aware.utcoffset() or timedelta(0)
    return off // timedelta(milliseconds=1)


def local_to_utc_ms(local_ms: int, zone: tzinfo) -> int | None:
    """Interpret wall-clock ms in zone.

    Repeated times (fall-back) take the earlier offset. Times skipped by a
    spring-forward gap move forward by the gap, so 02:30 becomes 03:30.
    """
    try:
        aware = (EPOCH_NAIVE + timedelta(milliseconds=local_ms)).replace(tzinfo=zone)
        if not tz.datetime_exists(aware):
            aware = tz.resolve_imaginary(aware)
    except OverflowError:
        return None
    return (aware - EPOCH_UTC) // timedelta(milliseconds=1)


def utc_fields(ms: int) -> DateFields:
    return split_ms(ms)


def local_fields(ms: int, zone: tzinfo) -> DateFields:
    return split_ms(ms + offset_ms(ms, zone))


def compose(f: DateFields, zone: tzinfo | None = None) -> int | None:
    """Fields -> epoch ms. zone=None reads the fields as UTC."""
    ms = join_fields(f)
    if ms is None:
        return None
    if zone is not None:
        ms = local_to_utc_ms(ms, zone)
    if ms is None or not in_range(ms):
        return None
    return ms
