"""Columnar tz-day bounds for polars frames of UTC timestamps."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import polars as pl

from tzday.tz_day import end_of_tz_day, start_of_tz_day, tz_date
from tzday.zones import resolve_zone

UTC_DATETIME = pl.Datetime(time_unit="us", time_zone="UTC")


def with_tz_day_bounds(
    frame: pl.DataFrame,
    column: str,
    zone: str | ZoneInfo,
    *,
    prefix: str | None = None,
) -> pl.DataFrame:
    """Add local date plus UTC start/end of the zone-local day for ``column``.

    Naive timestamps are read as UTC. Null timestamps produce null bounds.
    """
    if column not in frame.columns:
        raise ValueError(f"missing column: {column}")
    tz = resolve_zone(zone)
    name = prefix or column
    return frame.with_columns(
        pl.col(column)
        .map_elements(lambda value: tz_date(value, tz), return_dtype=pl.Date)
        .alias(f"{name}_tz_date"),
        pl.col(column)
        .map_elements(lambda value: start_of_tz_day(value, tz), return_dtype=UTC_DATETIME)
        .alias(f"{name}_day_start"),
        pl.col(column)
        .map_elements(lambda value: end_of_tz_day(value, tz), return_dtype=UTC_DATETIME)
        .alias(f"{name}_day_end"),
    )
