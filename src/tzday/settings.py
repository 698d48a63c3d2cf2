"""Application settings for tzday."""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tzday.convert import (
    AmbiguousPolicy,
    NonexistentPolicy,
    normalize_ambiguous_policy,
    normalize_nonexistent_policy,
)
from tzday.errors import UnknownZoneError
from tzday.zones import resolve_zone


class Settings(BaseSettings):
    """Defaults for the command line; library calls always take explicit arguments."""

    model_config = SettingsConfigDict(
        env_prefix="TZDAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_tz: str = "America/New_York"
    nonexistent: NonexistentPolicy = "shift"
    ambiguous: AmbiguousPolicy = "earlier"

    @field_validator("default_tz")
    @classmethod
    def check_zone(cls, value: str) -> str:
        try:
            return resolve_zone(value).key
        except UnknownZoneError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("nonexistent", mode="before")
    @classmethod
    def check_nonexistent(cls, value: Any) -> NonexistentPolicy:
        return normalize_nonexistent_policy(str(value))

    @field_validator("ambiguous", mode="before")
    @classmethod
    def check_ambiguous(cls, value: Any) -> AmbiguousPolicy:
        return normalize_ambiguous_policy(str(value))
