"""Calendar-day boundaries for UTC instants, in their own frame or a named zone."""

from tzday.convert import classify_local, is_ambiguous, is_nonexistent, to_local, to_utc, utc_offset
from tzday.day import (
    end_of_day,
    end_of_next_day,
    end_of_previous_day,
    start_of_day,
    start_of_next_day,
    start_of_previous_day,
)
from tzday.errors import (
    AmbiguousLocalTimeError,
    LocalTimeError,
    NonexistentLocalTimeError,
    TzDayError,
    UnknownZoneError,
)
from tzday.truncate import TICK, truncate, truncate_end
from tzday.tz_day import (
    end_of_next_tz_day,
    end_of_previous_tz_day,
    end_of_tz_day,
    start_of_next_tz_day,
    start_of_previous_tz_day,
    start_of_tz_day,
    tz_date,
    tz_day_window,
)
from tzday.weekday import Weekday, day_of_week
from tzday.zones import CENTRAL, EASTERN, MOUNTAIN, PACIFIC, UTC_ZONE, resolve_zone

__all__ = [
    "AmbiguousLocalTimeError",
    "CENTRAL",
    "EASTERN",
    "LocalTimeError",
    "MOUNTAIN",
    "NonexistentLocalTimeError",
    "PACIFIC",
    "TICK",
    "TzDayError",
    "UTC_ZONE",
    "UnknownZoneError",
    "Weekday",
    "classify_local",
    "day_of_week",
    "end_of_day",
    "end_of_next_day",
    "end_of_next_tz_day",
    "end_of_previous_day",
    "end_of_previous_tz_day",
    "end_of_tz_day",
    "is_ambiguous",
    "is_nonexistent",
    "resolve_zone",
    "start_of_day",
    "start_of_next_day",
    "start_of_next_tz_day",
    "start_of_previous_day",
    "start_of_previous_tz_day",
    "start_of_tz_day",
    "to_local",
    "to_utc",
    "truncate",
    "truncate_end",
    "tz_date",
    "tz_day_window",
    "utc_offset",
]
