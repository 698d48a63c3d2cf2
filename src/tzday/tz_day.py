"""Zone-local day boundaries for UTC instants.

Every operation converts the UTC instant to the zone's wall clock, applies the
matching :mod:`tzday.day` transform there, and converts back. The offset for
the return trip is resolved at the new wall-clock value, so a boundary on the
far side of a DST transition gets the offset in force there, not the one that
applied to the input.

End-of-day variants are always one tick before the following local day's
start, expressed in UTC. This keeps ``end_of_tz_day(t) == start_of_next_tz_day(t) - TICK``
even on days where the last wall-clock tick itself is skipped or repeated.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from tzday import day
from tzday.convert import AmbiguousPolicy, NonexistentPolicy, to_local, to_utc
from tzday.truncate import TICK
from tzday.zones import resolve_zone

NaiveTransform = Callable[[datetime], datetime]


def _tz_start(
    value: datetime,
    zone: str | ZoneInfo,
    transform: NaiveTransform,
    *,
    nonexistent: NonexistentPolicy,
    ambiguous: AmbiguousPolicy,
) -> datetime:
    tz = resolve_zone(zone)
    local = transform(to_local(value, tz))
    return to_utc(local, tz, nonexistent=nonexistent, ambiguous=ambiguous)


def _tz_end(
    value: datetime,
    zone: str | ZoneInfo,
    transform: NaiveTransform,
    *,
    nonexistent: NonexistentPolicy,
    ambiguous: AmbiguousPolicy,
) -> datetime:
    tz = resolve_zone(zone)
    following_start = transform(to_local(value, tz)) + TICK
    return to_utc(following_start, tz, nonexistent=nonexistent, ambiguous=ambiguous) - TICK


def start_of_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    """UTC instant of local midnight starting the zone-local day containing ``value``."""
    return _tz_start(
        value, zone, day.start_of_day, nonexistent=nonexistent, ambiguous=ambiguous
    )


def start_of_previous_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    return _tz_start(
        value, zone, day.start_of_previous_day, nonexistent=nonexistent, ambiguous=ambiguous
    )


def start_of_next_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    return _tz_start(
        value, zone, day.start_of_next_day, nonexistent=nonexistent, ambiguous=ambiguous
    )


def end_of_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    """UTC instant one tick before the next local midnight."""
    return _tz_end(value, zone, day.end_of_day, nonexistent=nonexistent, ambiguous=ambiguous)


def end_of_previous_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    return _tz_end(
        value, zone, day.end_of_previous_day, nonexistent=nonexistent, ambiguous=ambiguous
    )


def end_of_next_tz_day(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    return _tz_end(
        value, zone, day.end_of_next_day, nonexistent=nonexistent, ambiguous=ambiguous
    )


def tz_date(value: datetime, zone: str | ZoneInfo) -> date:
    """Calendar date of ``value`` on the zone's wall clock."""
    return to_local(value, zone).date()


def tz_day_window(
    day_value: date | str,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> tuple[datetime, datetime]:
    """Return UTC bounds ``[start, end)`` for one local calendar day.

    Both local midnights go through the same gap and overlap policies as the
    other tz-day operations; a ``raise`` policy propagates its error.
    """
    if isinstance(day_value, str):
        try:
            parsed_day = date.fromisoformat(day_value.strip())
        except ValueError as exc:
            raise ValueError(f"invalid day value: {day_value}") from exc
    else:
        parsed_day = day_value
    tz = resolve_zone(zone)
    local_midnight = datetime.combine(parsed_day, time.min)
    start = to_utc(local_midnight, tz, nonexistent=nonexistent, ambiguous=ambiguous)
    end = to_utc(
        day.start_of_next_day(local_midnight), tz, nonexistent=nonexistent, ambiguous=ambiguous
    )
    return start, end
