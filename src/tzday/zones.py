"""Zone resolution and well-known zone handles."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzday.errors import UnknownZoneError

UTC_ZONE = ZoneInfo("UTC")
EASTERN = ZoneInfo("America/New_York")
CENTRAL = ZoneInfo("America/Chicago")
MOUNTAIN = ZoneInfo("America/Denver")
PACIFIC = ZoneInfo("America/Los_Angeles")


def resolve_zone(value: str | ZoneInfo) -> ZoneInfo:
    """Resolve an IANA zone name (or pass through a ZoneInfo)."""
    if isinstance(value, ZoneInfo):
        return value
    name = str(value).strip()
    if not name:
        raise UnknownZoneError("zone name is required")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownZoneError(f"unknown zone: {name}") from exc
