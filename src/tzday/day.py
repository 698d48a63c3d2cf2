"""Day boundaries in whatever frame the input datetime already carries.

Nothing here converts between zones: a naive datetime stays naive, an aware
one keeps its tzinfo. Shifting by one day is plain datetime arithmetic on the
value as given, so callers wanting zone-local days should go through
:mod:`tzday.tz_day` instead.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from tzday.truncate import truncate, truncate_end

ONE_DAY = timedelta(days=1)


def start_of_day(value: datetime) -> datetime:
    return truncate(value, "day")


def end_of_day(value: datetime) -> datetime:
    """Last tick of the value's calendar date (start of next day minus one tick)."""
    return truncate_end(value, "day")


def start_of_next_day(value: datetime) -> datetime:
    return start_of_day(value) + ONE_DAY


def start_of_previous_day(value: datetime) -> datetime:
    return start_of_day(value) - ONE_DAY


def end_of_next_day(value: datetime) -> datetime:
    return end_of_day(value) + ONE_DAY


def end_of_previous_day(value: datetime) -> datetime:
    return end_of_day(value) - ONE_DAY
