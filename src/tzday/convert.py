"""UTC <-> zone-local wall-clock conversion.

Wall-clock values are naive datetimes; the zone always travels as a separate
argument. The offset is resolved independently on each conversion, so a round
trip across a DST transition picks up whichever offset applies at the other
end.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Literal
from zoneinfo import ZoneInfo

from tzday.errors import AmbiguousLocalTimeError, NonexistentLocalTimeError
from tzday.zones import resolve_zone

NonexistentPolicy = Literal["shift", "raise"]
AmbiguousPolicy = Literal["earlier", "later", "raise"]
LocalTimeKind = Literal["regular", "nonexistent", "ambiguous"]

_VALID_NONEXISTENT: tuple[NonexistentPolicy, ...] = ("shift", "raise")
_VALID_AMBIGUOUS: tuple[AmbiguousPolicy, ...] = ("earlier", "later", "raise")


def normalize_nonexistent_policy(value: str) -> NonexistentPolicy:
    """Normalize CLI/env value to a supported spring-forward gap policy."""
    cleaned = value.strip().lower()
    if cleaned in _VALID_NONEXISTENT:
        return cleaned
    raise ValueError(f"invalid nonexistent-time policy: {value}")


def normalize_ambiguous_policy(value: str) -> AmbiguousPolicy:
    """Normalize CLI/env value to a supported fall-back overlap policy."""
    cleaned = value.strip().lower()
    if cleaned in _VALID_AMBIGUOUS:
        return cleaned
    raise ValueError(f"invalid ambiguous-time policy: {value}")


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)


def _require_naive(value: datetime) -> None:
    if value.tzinfo is not None:
        raise ValueError(f"expected a naive wall-clock value, got {value.isoformat()}")


def to_local(value: datetime, zone: str | ZoneInfo) -> datetime:
    """Return the naive wall-clock reading of ``zone`` at a UTC instant.

    Naive input is taken to be UTC.
    """
    tz = resolve_zone(zone)
    return _as_utc(value).astimezone(tz).replace(tzinfo=None, fold=0)


def classify_local(value: datetime, zone: str | ZoneInfo) -> LocalTimeKind:
    """Report whether a wall-clock value is regular, skipped, or repeated in ``zone``."""
    _require_naive(value)
    tz = resolve_zone(zone)
    first = value.replace(tzinfo=tz, fold=0)
    second = value.replace(tzinfo=tz, fold=1)
    if first.utcoffset() == second.utcoffset():
        return "regular"
    round_trip = first.astimezone(UTC).astimezone(tz).replace(tzinfo=None)
    if round_trip != value:
        return "nonexistent"
    return "ambiguous"


def is_nonexistent(value: datetime, zone: str | ZoneInfo) -> bool:
    return classify_local(value, zone) == "nonexistent"


def is_ambiguous(value: datetime, zone: str | ZoneInfo) -> bool:
    return classify_local(value, zone) == "ambiguous"


def to_utc(
    value: datetime,
    zone: str | ZoneInfo,
    *,
    nonexistent: NonexistentPolicy = "shift",
    ambiguous: AmbiguousPolicy = "earlier",
) -> datetime:
    """Resolve a naive wall-clock value in ``zone`` to an aware UTC datetime.

    Gap policy ``shift`` reads the skipped value with the pre-transition
    offset, which lands it the gap length later on the post-transition clock
    (``02:30`` on a spring-forward night becomes ``03:30``). Overlap policy
    ``earlier`` picks the first occurrence, which on a fall-back night is the
    daylight-time reading (``01:30 EDT`` rather than ``01:30 EST``); ``later``
    picks the second, standard-time occurrence. Either policy set to
    ``raise`` raises the matching :class:`LocalTimeError`.
    """
    _require_naive(value)
    tz = resolve_zone(zone)
    gap_policy = normalize_nonexistent_policy(nonexistent)
    overlap_policy = normalize_ambiguous_policy(ambiguous)

    kind = classify_local(value, tz)
    if kind == "nonexistent" and gap_policy == "raise":
        raise NonexistentLocalTimeError(value, tz)
    if kind == "ambiguous":
        if overlap_policy == "raise":
            raise AmbiguousLocalTimeError(value, tz)
        if overlap_policy == "later":
            return value.replace(tzinfo=tz, fold=1).astimezone(UTC)
    return value.replace(tzinfo=tz, fold=0).astimezone(UTC)


def utc_offset(value: datetime, zone: str | ZoneInfo) -> timedelta:
    """Return the offset of ``zone`` in effect at a UTC instant."""
    tz = resolve_zone(zone)
    offset = _as_utc(value).astimezone(tz).utcoffset()
    return offset if offset is not None else timedelta(0)
