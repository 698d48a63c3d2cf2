"""UTC instant formatting and parsing at microsecond-tick resolution."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time, keeping the full tick resolution."""
    return datetime.now(UTC)


def format_utc(value: datetime, *, ticks: bool = False) -> str:
    """Format an instant as ISO-8601 UTC with a trailing ``Z``.

    Naive values are read as UTC. With ``ticks`` the fraction is always
    written out to the microsecond so boundaries line up column by column;
    otherwise it is dropped when zero.
    """
    normalized = value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    timespec = "microseconds" if ticks else "auto"
    return normalized.isoformat(timespec=timespec).removesuffix("+00:00") + "Z"


def parse_utc(value: str) -> datetime | None:
    """Parse an ISO timestamp or bare ``YYYY-MM-DD`` into an aware UTC instant.

    A bare date means UTC midnight of that day. Returns ``None`` for blank or
    unparseable input.
    """
    raw = value.strip()
    if not raw:
        return None
    if raw[-1] in "Zz":
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
