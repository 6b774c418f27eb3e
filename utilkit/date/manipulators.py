from __future__ import annotations

from collections.abc import Callable, Mapping

from ..settings import local_zone
from .civil import compose
from .parsers import parse_date
from .types import DateInput, DateOptions, DateValue

# Option name -> DateFields name, in the order manipulate_date() applies them.
FIELD_ORDER: tuple[tuple[str, str], ...] = (
    ("milliseconds", "milliseconds"),
    ("seconds", "seconds"),
    ("minutes", "minutes"),
    ("hours", "hours"),
    ("days", "day"),
    ("months", "month"),
    ("years", "year"),
)


def _shift(d: DateValue, field: str, amount: int, *, utc: bool) -> DateValue:
    """Add amount to one field of the chosen view and let the calendar normalize the rest."""
    zone = None if utc else local_zone()
    fields = d.utc_fields() if utc else d.local_fields(zone)
    if fields is None:
        return d
    fields = fields._replace(**{field: getattr(fields, field) + int(amount)})
    return DateValue.from_ms(compose(fields, zone))


def _manipulator(option: str, field: str, *, utc: bool) -> Callable[..., DateValue]:
    def manipulate(amount: int, value: DateInput | None = None) -> DateValue:
        return _shift(parse_date(value), field, amount, utc=utc)

    view = "UTC" if utc else "local"
    manipulate.__name__ = f"manipulate_{option}{'_utc' if utc else ''}"
    manipulate.__doc__ = f"Return a new DateValue with amount {option} added in the {view} view."
    return manipulate


manipulate_milliseconds = _manipulator("milliseconds", "milliseconds", utc=False)
manipulate_milliseconds_utc = _manipulator("milliseconds", "milliseconds", utc=True)
manipulate_seconds = _manipulator("seconds", "seconds", utc=False)
manipulate_seconds_utc = _manipulator("seconds", "seconds", utc=True)
manipulate_minutes = _manipulator("minutes", "minutes", utc=False)
manipulate_minutes_utc = _manipulator("minutes", "minutes", utc=True)
manipulate_hours = _manipulator("hours", "hours", utc=False)
manipulate_hours_utc = _manipulator("hours", "hours", utc=True)
manipulate_days = _manipulator("days", "day", utc=False)
manipulate_days_utc = _manipulator("days", "day", utc=True)
manipulate_months = _manipulator("months", "month", utc=False)
manipulate_months_utc = _manipulator("months", "month", utc=True)
manipulate_years = _manipulator("years", "year", utc=False)
manipulate_years_utc = _manipulator("years", "year", utc=True)


def manipulate_date(options: DateOptions | Mapping[str, int | bool], value: DateInput | None = None) -> DateValue:
    """Apply several field offsets at once.

    Fields run in a fixed order (milliseconds, seconds, minutes, hours, days,
    months, years), each on the previous result, so {"days": -1, "months": 1}
    on 2022-04-09 goes to May 9 and then May 8. Zero fields are skipped.

    options may be a DateOptions or a mapping with the same keys.
    """

    if not isinstance(options, DateOptions):
        options = DateOptions(**dict(options))

    result = parse_date(value)
    for option, field in FIELD_ORDER:
        amount = getattr(options, option)
        if not amount:
            continue
        result = _shift(result, field, amount, utc=options.utc)
    return result
