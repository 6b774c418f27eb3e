from __future__ import annotations

import pytest

from utilkit.date import (
    DateOptions,
    frozen_clock,
    get_year,
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
    parse_date,
)

REF_ISO = "2023-06-15T10:30:45.123Z"
REF_MS = 1686825045123
HOUR = 3_600_000
DAY = 24 * HOUR


def test_single_field_offsets() -> None:
    assert manipulate_milliseconds(100, REF_ISO).ms == REF_MS + 100
    assert manipulate_milliseconds_utc(200, REF_ISO).ms == REF_MS + 200
    assert manipulate_seconds(15, REF_ISO).ms == REF_MS + 15_000
    assert manipulate_minutes(30, REF_ISO).ms == REF_MS + 30 * 60_000
    assert manipulate_hours(2, REF_ISO).ms == REF_MS + 2 * HOUR
    assert manipulate_days(5, REF_ISO).ms == REF_MS + 5 * DAY


def test_negative_offsets_reach_zero_fields() -> None:
    assert manipulate_milliseconds(-123, REF_ISO).utc_fields().milliseconds == 0
    assert manipulate_seconds(-45, REF_ISO).utc_fields().seconds == 0


def test_utc_field_offsets() -> None:
    assert manipulate_seconds_utc(10, REF_ISO).utc_fields().seconds == 55
    assert manipulate_minutes_utc(15, REF_ISO).utc_fields().minutes == 45
    assert manipulate_hours_utc(3, REF_ISO).utc_fields().hours == 13
    assert manipulate_days_utc(10, REF_ISO).utc_fields().day == 25
    assert manipulate_months_utc(1, REF_ISO).utc_fields().month == 6
    assert manipulate_years_utc(5, REF_ISO).utc_fields().year == 2028


def test_day_underflow_rolls_into_previous_month() -> None:
    f = manipulate_days(-15, REF_ISO).utc_fields()
    assert (f.month, f.day) == (4, 31)


def test_month_overflow_and_underflow() -> None:
    assert manipulate_months(3, REF_ISO).local_fields().month == 8
    f = manipulate_months(-6, REF_ISO).local_fields()
    assert (f.year, f.month) == (2022, 11)
    # Feb 31 does not exist and spills into March.
    f = manipulate_months_utc(1, "2023-01-31T00:00:00Z").utc_fields()
    assert (f.month, f.day) == (2, 3)


def test_years() -> None:
    assert get_year(manipulate_years(2, REF_ISO)) == 2025
    assert get_year(manipulate_years(-3, REF_ISO)) == 2020


def test_default_is_now() -> None:
    with frozen_clock(REF_ISO):
        assert manipulate_milliseconds(0).ms == REF_MS
        assert manipulate_date({"days": 0}).ms == REF_MS


def test_input_is_not_mutated() -> None:
    d = parse_date(REF_ISO)
    out = manipulate_days(3, d)
    assert d.ms == REF_MS
    assert out is not d


def test_composite_applies_fields_in_fixed_order() -> None:
    f = manipulate_date({"days": -1, "months": 1}, "2022-04-09").utc_fields()
    assert (f.year, f.month, f.day) == (2022, 4, 8)

    # Days before months: Mar 1 -> Feb 28 -> Mar 28 (months first would give Mar 31).
    f = manipulate_date(DateOptions(days=-1, months=1), "2023-03-01").utc_fields()
    assert (f.month, f.day) == (2, 28)


def test_composite_all_fields_utc() -> None:
    opts = DateOptions(milliseconds=50, seconds=5, minutes=3, hours=1, days=2, months=1, years=1, utc=True)
    f = manipulate_date(opts, REF_ISO).utc_fields()
    assert tuple(f) == (2024, 6, 17, 11, 33, 50, 173)


def test_composite_negative_fields_utc() -> None:
    opts = {
        "milliseconds": -100,
        "seconds": -10,
        "minutes": -5,
        "hours": -1,
        "days": -1,
        "months": -1,
        "years": -1,
        "utc": True,
    }
    assert manipulate_date(opts, REF_ISO).utc_fields().year == 2022


@pytest.mark.parametrize("opts", [{}, {"utc": True}, DateOptions(), {"days": 0, "years": 0}])
def test_zero_offsets_leave_timestamp_unchanged(opts: object) -> None:
    assert manipulate_date(opts, REF_ISO).ms == REF_MS  # type: ignore[arg-type]


def test_unknown_option_raises() -> None:
    with pytest.raises(TypeError):
        manipulate_date({"weeks": 1}, REF_ISO)


def test_local_days_follow_wall_clock_across_dst(new_york: None) -> None:
    # DST starts in New York on 2023-03-12, so that local day is 23 hours long.
    start = parse_date("2023-03-11T12:00:00-05:00")
    assert manipulate_days(1, start).ms - start.ms == 23 * HOUR
    assert manipulate_days_utc(1, start).ms - start.ms == 24 * HOUR
    assert manipulate_date({"days": 1, "utc": True}, start).ms - start.ms == 24 * HOUR


def test_local_shift_into_spring_forward_gap_moves_past_it(new_york: None) -> None:
    # 02:00-03:00 local does not exist on 2023-03-12; wall times inside it land an hour later.
    assert manipulate_hours(1, "2023-03-12T06:30:00Z").ms == parse_date("2023-03-12T07:30:00Z").ms
    assert manipulate_hours(1, "2023-03-12T01:30:00-05:00").ms == parse_date("2023-03-12T03:30:00-04:00").ms
    assert manipulate_minutes(1, "2023-03-12T06:59:00Z").ms - parse_date("2023-03-12T06:59:00Z").ms == 60_000
    assert manipulate_days(1, "2023-03-11T07:30:00Z").ms == parse_date("2023-03-12T07:30:00Z").ms


def test_invalid_date_stays_invalid() -> None:
    assert not manipulate_days(1, "garbage").is_valid
    assert not manipulate_date({"hours": 1}, "garbage").is_valid


def test_overflow_past_supported_range_is_invalid() -> None:
    assert not manipulate_years(10_000, REF_ISO).is_valid
