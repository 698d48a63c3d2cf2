"""Error types for tz-day boundary flows."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo


class TzDayError(Exception):
    """Base error for tz-day operations."""


class UnknownZoneError(TzDayError):
    """Raised when a zone name cannot be resolved by the host tz database."""


class LocalTimeError(TzDayError):
    """Raised when a wall-clock value has no single UTC counterpart in a zone."""

    def __init__(self, local: datetime, zone: ZoneInfo, message: str) -> None:
        super().__init__(message)
        self.local = local
        self.zone = zone


class NonexistentLocalTimeError(LocalTimeError):
    """Raised when a wall-clock value falls inside a spring-forward gap."""

    def __init__(self, local: datetime, zone: ZoneInfo) -> None:
        super().__init__(local, zone, f"nonexistent local time {local.isoformat()} in {zone.key}")


class AmbiguousLocalTimeError(LocalTimeError):
    """Raised when a wall-clock value falls inside a fall-back overlap."""

    def __init__(self, local: datetime, zone: ZoneInfo) -> None:
        super().__init__(local, zone, f"ambiguous local time {local.isoformat()} in {zone.key}")


class CLIError(TzDayError):
    """User-facing CLI error for tzday commands."""
