from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Literal, Union

from ..settings import local_zone
from .civil import EPOCH_UTC, DateFields, in_range, local_fields, utc_fields

DateUnit = Literal["milliseconds", "seconds", "minutes", "hours", "days", "months", "years"]

FormatStyle = Literal["time", "utc", "date", "iso", "locale", "locale-time", "custom"]

INVALID_DATE = "Invalid Date"


@dataclass(frozen=True)
class DateValue:
    """An instant with millisecond precision, readable in a local or a UTC view.

    ms is None for the invalid sentinel produced by unparseable input.
    """

    ms: int | None

    @classmethod
    def invalid(cls) -> "DateValue":
        return cls(ms=None)

    @classmethod
    def from_ms(cls, ms: int | None) -> "DateValue":
        if ms is None or not in_range(ms):
            return cls.invalid()
        return cls(ms=int(ms))

    @property
    def is_valid(self) -> bool:
        return self.ms is not None

    def get_time(self) -> int | float:
        return self.ms if self.ms is not None else math.nan

    def utc_fields(self) -> DateFields | None:
        if self.ms is None:
            return None
        return utc_fields(self.ms)

    def local_fields(self, zone: tzinfo | None = None) -> DateFields | None:
        if self.ms is None:
            return None
        return local_fields(self.ms, zone or local_zone())

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        """Aware datetime for this instant (UTC unless tz is given)."""
        if self.ms is None:
            raise ValueError(INVALID_DATE)
        dt = EPOCH_UTC + timedelta(milliseconds=self.ms)
        return dt.astimezone(tz) if tz is not None else dt


DateInput = Union[DateValue, datetime, date, str, int, float]


class InvalidUnitError(ValueError):
    """Raised for a time unit outside DateUnit."""

    def __init__(self, unit: object, expected: tuple[str, ...]) -> None:
        self.unit = unit
        super().__init__(f'Invalid date unit: "{unit}". Expected one of: {", ".join(expected)}')


@dataclass(frozen=True)
class DateOptions:
    """Signed offsets for manipulate_date(). Zero fields are skipped.

    utc selects the UTC view for every field of one call.
    """

    milliseconds: int = 0
    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    days: int = 0
    months: int = 0
    years: int = 0
    utc: bool = False


# Deprecated name kept for older callers.
OptionsDate = DateOptions
