from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tzday.settings import Settings

_ENV_KEYS = ("TZDAY_DEFAULT_TZ", "TZDAY_NONEXISTENT", "TZDAY_AMBIGUOUS")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.default_tz == "America/New_York"
    assert settings.nonexistent == "shift"
    assert settings.ambiguous == "earlier"


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZDAY_DEFAULT_TZ", " Europe/London ")
    monkeypatch.setenv("TZDAY_AMBIGUOUS", "LATER")
    settings = Settings()
    assert settings.default_tz == "Europe/London"
    assert settings.ambiguous == "later"


def test_settings_read_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TZDAY_NONEXISTENT=raise\n", encoding="utf-8")
    assert Settings().nonexistent == "raise"


@pytest.mark.parametrize(
    ("key", "value"),
    [("TZDAY_DEFAULT_TZ", "Mars/Base"), ("TZDAY_NONEXISTENT", "skip"), ("TZDAY_AMBIGUOUS", "x")],
)
def test_settings_reject_invalid_values(
    monkeypatch: pytest.MonkeyPatch, key: str, value: str
) -> None:
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_policies_are_normalized_literals(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZDAY_NONEXISTENT", " Raise ")
    monkeypatch.setenv("TZDAY_AMBIGUOUS", "Earlier")
    settings = Settings()
    assert settings.nonexistent == "raise"
    assert settings.ambiguous == "earlier"
