"""Weekday enum (Sunday-first ordering) and date-to-weekday derivation."""

from __future__ import annotations

from datetime import date, datetime
from enum import IntEnum


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def label(self) -> str:
        return str(self)

    @classmethod
    def from_ordinal(cls, value: int) -> Weekday:
        """Build from a Sunday-first ordinal (0..6)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"invalid weekday ordinal: {value!r}")
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"invalid weekday ordinal: {value}") from exc

    @classmethod
    def from_name(cls, value: str) -> Weekday:
        """Build from a full or three-letter English day name, any case."""
        cleaned = value.strip().upper()
        if len(cleaned) >= 3:
            for member in cls:
                if member.name == cleaned or member.name[:3] == cleaned:
                    return member
        raise ValueError(f"invalid weekday name: {value}")


def day_of_week(value: date | datetime) -> Weekday:
    """Return the weekday of the value's own calendar date; no zone conversion."""
    return Weekday(value.isoweekday() % 7)
