"""CLI entrypoint for tz-day boundary lookups."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from tzday.convert import to_local
from tzday.errors import CLIError, TzDayError
from tzday.settings import Settings
from tzday.time_utils import format_utc, parse_utc, utc_now
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
from tzday.weekday import day_of_week
from tzday.zones import resolve_zone


_BOUNDARIES = (
    ("start_of_day", start_of_tz_day),
    ("end_of_day", end_of_tz_day),
    ("start_of_previous_day", start_of_previous_tz_day),
    ("end_of_previous_day", end_of_previous_tz_day),
    ("start_of_next_day", start_of_next_tz_day),
    ("end_of_next_day", end_of_next_tz_day),
)


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise CLIError(f"invalid TZDAY_* settings: {exc}") from exc


def _parse_at(raw: str | None) -> datetime:
    if raw is None or not raw.strip():
        return utc_now()
    parsed = parse_utc(raw)
    if parsed is None:
        raise CLIError(f"invalid --at timestamp: {raw}")
    return parsed


def _policies(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    return {
        "nonexistent": args.nonexistent or settings.nonexistent,
        "ambiguous": args.ambiguous or settings.ambiguous,
    }


def _emit(payload: dict[str, Any], *, json_output: bool) -> None:
    if json_output:
        print(json.dumps(payload, sort_keys=True))
        return
    for key, value in payload.items():
        print(f"{key}={value}")


def _cmd_bounds(args: argparse.Namespace) -> int:
    settings = _load_settings()
    zone = resolve_zone(args.tz or settings.default_tz)
    at = _parse_at(args.at)
    policies = _policies(args, settings)
    ticks = bool(args.ticks)
    payload: dict[str, Any] = {
        "at": format_utc(at, ticks=ticks),
        "tz": zone.key,
        "local_date": tz_date(at, zone).isoformat(),
        "weekday": str(day_of_week(to_local(at, zone))),
    }
    for key, boundary in _BOUNDARIES:
        payload[key] = format_utc(boundary(at, zone, **policies), ticks=ticks)
    _emit(payload, json_output=bool(args.json_output))
    return 0


def _cmd_window(args: argparse.Namespace) -> int:
    settings = _load_settings()
    zone = resolve_zone(args.tz or settings.default_tz)
    start, end = tz_day_window(args.day, zone, **_policies(args, settings))
    ticks = bool(args.ticks)
    payload = {
        "day": args.day,
        "tz": zone.key,
        "start": format_utc(start, ticks=ticks),
        "end": format_utc(end, ticks=ticks),
    }
    _emit(payload, json_output=bool(args.json_output))
    return 0


def _cmd_weekday(args: argparse.Namespace) -> int:
    settings = _load_settings()
    zone = resolve_zone(args.tz or settings.default_tz)
    at = _parse_at(args.at)
    print(str(day_of_week(to_local(at, zone))))
    return 0


def _add_policy_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--nonexistent",
        choices=["shift", "raise"],
        default=None,
        help="Policy for skipped local midnights (default: TZDAY_NONEXISTENT)",
    )
    parser.add_argument(
        "--ambiguous",
        choices=["earlier", "later", "raise"],
        default=None,
        help="Policy for repeated local midnights (default: TZDAY_AMBIGUOUS)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tzday", description="Zone-local day boundaries")
    subparsers = parser.add_subparsers(dest="command")

    bounds = subparsers.add_parser("bounds", help="Print tz-day boundaries for an instant")
    bounds.add_argument("--at", default=None, help="ISO-8601 instant (default: now, UTC)")
    bounds.add_argument("--tz", default=None, help="IANA zone (default: TZDAY_DEFAULT_TZ)")
    _add_policy_args(bounds)
    bounds.add_argument("--ticks", action="store_true", help="Always print microseconds")
    bounds.add_argument("--json", dest="json_output", action="store_true")
    bounds.set_defaults(func=_cmd_bounds)

    window = subparsers.add_parser("window", help="Print UTC bounds [start, end) of a local day")
    window.add_argument("--day", required=True, help="YYYY-MM-DD")
    window.add_argument("--tz", default=None)
    _add_policy_args(window)
    window.add_argument("--ticks", action="store_true", help="Always print microseconds")
    window.add_argument("--json", dest="json_output", action="store_true")
    window.set_defaults(func=_cmd_window)

    weekday = subparsers.add_parser("weekday", help="Print the local weekday of an instant")
    weekday.add_argument("--at", default=None)
    weekday.add_argument("--tz", default=None)
    weekday.set_defaults(func=_cmd_weekday)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    try:
        return int(func(args))
    except (TzDayError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
