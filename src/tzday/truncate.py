"""Start/end of a unit of time containing a datetime."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Literal

from tzday.weekday import Weekday, day_of_week

TimeUnit = Literal["year", "month", "week", "day", "hour", "minute", "second"]

# Smallest step a datetime can represent.
TICK = timedelta(microseconds=1)

_VALID_UNITS: tuple[TimeUnit, ...] = ("year", "month", "week", "day", "hour", "minute", "second")


def normalize_unit(value: str) -> TimeUnit:
    """Normalize a unit name to a supported unit of time."""
    cleaned = value.strip().lower()
    if cleaned in _VALID_UNITS:
        return cleaned
    raise ValueError(f"invalid unit of time: {value}")


def truncate(value: datetime, unit: str, *, week_start: Weekday = Weekday.SUNDAY) -> datetime:
    """Return the first instant of the unit containing ``value``.

    tzinfo is carried over untouched; the result lives in the same frame as the
    input.
    """
    resolved = normalize_unit(unit)
    if resolved == "second":
        return value.replace(microsecond=0)
    if resolved == "minute":
        return value.replace(second=0, microsecond=0)
    if resolved == "hour":
        return value.replace(minute=0, second=0, microsecond=0)
    start_of_day = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if resolved == "day":
        return start_of_day
    if resolved == "week":
        days_back = (day_of_week(value) - week_start) % 7
        return start_of_day - timedelta(days=days_back)
    if resolved == "month":
        return start_of_day.replace(day=1)
    return start_of_day.replace(month=1, day=1)


def _start_of_following(start: datetime, unit: TimeUnit) -> datetime:
    if unit == "second":
        return start + timedelta(seconds=1)
    if unit == "minute":
        return start + timedelta(minutes=1)
    if unit == "hour":
        return start + timedelta(hours=1)
    if unit == "day":
        return start + timedelta(days=1)
    if unit == "week":
        return start + timedelta(days=7)
    if unit == "month":
        if start.month == 12:
            return start.replace(year=start.year + 1, month=1)
        return start.replace(month=start.month + 1)
    return start.replace(year=start.year + 1)


def truncate_end(value: datetime, unit: str, *, week_start: Weekday = Weekday.SUNDAY) -> datetime:
    """Return the last representable instant of the unit containing ``value``.

    Computed as the start of the following unit minus one tick, so the result
    never depends on a hardcoded ``23:59:59``.
    """
    resolved = normalize_unit(unit)
    start = truncate(value, resolved, week_start=week_start)
    return _start_of_following(start, resolved) - TICK
