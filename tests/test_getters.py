from __future__ import annotations

import math

import pytest

from utilkit.date import (
    frozen_clock,
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

REF_ISO = "2023-06-15T10:30:45.123Z"

ALL_GETTERS = [
    get_milliseconds,
    get_milliseconds_utc,
    get_seconds,
    get_seconds_utc,
    get_minutes,
    get_minutes_utc,
    get_hours,
    get_hours_utc,
    get_day,
    get_day_utc,
    get_month,
    get_month_utc,
    get_year,
    get_year_utc,
]


def test_utc_getters() -> None:
    assert get_milliseconds_utc(REF_ISO) == 123
    assert get_seconds_utc(REF_ISO) == 45
    assert get_minutes_utc(REF_ISO) == 30
    assert get_hours_utc(REF_ISO) == 10
    assert get_day_utc(REF_ISO) == 15
    assert get_month_utc(REF_ISO) == 5  # June, zero-based
    assert get_year_utc(REF_ISO) == 2023


def test_local_getters_follow_configured_zone(new_york: None) -> None:
    assert get_hours(REF_ISO) == 6
    assert get_hours_utc(REF_ISO) == 10
    assert get_minutes(REF_ISO) == 30
    assert get_milliseconds(REF_ISO) == 123

    # 02:00Z on Jan 1 is still Dec 31 in New York.
    new_year = "2024-01-01T02:00:00Z"
    assert (get_year(new_year), get_month(new_year), get_day(new_year)) == (2023, 11, 31)
    assert (get_year_utc(new_year), get_month_utc(new_year), get_day_utc(new_year)) == (2024, 0, 1)


def test_getters_default_to_now() -> None:
    with frozen_clock(REF_ISO):
        assert get_seconds() == 45
        assert get_year() == 2023


@pytest.mark.parametrize("value", ["1999-12-31T23:59:59.999Z", 0, "2024-02-29T12:00:00Z", -86_400_001])
def test_field_ranges(new_york: None, value: object) -> None:
    for utc in (False, True):
        month = get_month_utc(value) if utc else get_month(value)
        day = get_day_utc(value) if utc else get_day(value)
        hours = get_hours_utc(value) if utc else get_hours(value)
        assert 0 <= month <= 11
        assert 1 <= day <= 31
        assert 0 <= hours <= 23
        assert 0 <= get_minutes(value) <= 59
        assert 0 <= get_seconds(value) <= 59
        assert 0 <= get_milliseconds(value) <= 999


def test_invalid_date_gives_nan() -> None:
    for get in ALL_GETTERS:
        assert math.isnan(get("garbage"))
