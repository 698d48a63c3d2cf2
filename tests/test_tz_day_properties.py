"""Property tests for day boundaries across DST transitions."""

from __future__ import annotations

from datetime import UTC, datetime, time
from zoneinfo import ZoneInfo

from hypothesis import given, settings, strategies as st

from tzday.convert import to_local
from tzday.day import end_of_day, start_of_day, start_of_next_day
from tzday.truncate import TICK
from tzday.tz_day import (
    end_of_next_tz_day,
    end_of_previous_tz_day,
    end_of_tz_day,
    start_of_next_tz_day,
    start_of_previous_tz_day,
    start_of_tz_day,
    tz_date,
)
from tzday.zones import resolve_zone

# None of these zones move their clocks across local midnight.
ZONE_NAMES = [
    "America/New_York",
    "America/Los_Angeles",
    "Europe/Berlin",
    "Europe/London",
    "Australia/Sydney",
    "Pacific/Chatham",
    "Asia/Kolkata",
    "Asia/Tokyo",
]

naive_values = st.datetimes(min_value=datetime(1900, 1, 2), max_value=datetime(2100, 12, 30))
utc_instants = st.datetimes(
    min_value=datetime(1990, 1, 1), max_value=datetime(2037, 12, 31), timezones=st.just(UTC)
)
zones = st.sampled_from(ZONE_NAMES).map(resolve_zone)


@given(value=naive_values)
@settings(max_examples=200)
def test_start_of_day_is_idempotent(value: datetime) -> None:
    assert start_of_day(start_of_day(value)) == start_of_day(value)


@given(value=naive_values)
@settings(max_examples=200)
def test_end_of_day_is_one_tick_before_next_day(value: datetime) -> None:
    assert end_of_day(value) == start_of_next_day(value) - TICK
    assert start_of_day(value).time() == time(0)
    assert end_of_day(value).time() == time(23, 59, 59, 999999)
    assert end_of_day(value).date() == value.date()


@given(value=utc_instants, zone=zones)
@settings(max_examples=300)
def test_start_of_tz_day_is_idempotent(value: datetime, zone: ZoneInfo) -> None:
    start = start_of_tz_day(value, zone)
    assert start_of_tz_day(start, zone) == start


@given(value=utc_instants, zone=zones)
@settings(max_examples=300)
def test_tz_day_contains_the_instant(value: datetime, zone: ZoneInfo) -> None:
    start = start_of_tz_day(value, zone)
    end = end_of_tz_day(value, zone)
    assert start <= value <= end
    assert end == start_of_next_tz_day(value, zone) - TICK
    assert to_local(start, zone) == datetime.combine(tz_date(value, zone), time.min)
    assert to_local(end, zone).time() == time(23, 59, 59, 999999)


@given(value=utc_instants, zone=zones)
@settings(max_examples=300)
def test_adjacent_days_line_up(value: datetime, zone: ZoneInfo) -> None:
    next_start = start_of_next_tz_day(value, zone)
    previous_start = start_of_previous_tz_day(value, zone)
    assert start_of_previous_tz_day(next_start, zone) == start_of_tz_day(value, zone)
    assert end_of_previous_tz_day(value, zone) == start_of_tz_day(value, zone) - TICK
    assert end_of_tz_day(previous_start, zone) == end_of_previous_tz_day(value, zone)
    assert end_of_next_tz_day(value, zone) == end_of_tz_day(next_start, zone)
