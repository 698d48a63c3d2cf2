from __future__ import annotations

from datetime import UTC, date, datetime

import polars as pl
import pytest

from tzday.frame import with_tz_day_bounds
from tzday.zones import EASTERN


def _frame() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "event_id": ["a", "b", "c"],
            "ts": [
                datetime(2023, 3, 12, 12, tzinfo=UTC),
                datetime(2023, 11, 5, 12, tzinfo=UTC),
                None,
            ],
        },
        schema={"event_id": pl.Utf8, "ts": pl.Datetime(time_unit="us", time_zone="UTC")},
    )


def test_with_tz_day_bounds_adds_local_day_columns() -> None:
    frame = _frame()

    out = with_tz_day_bounds(frame, "ts", EASTERN)

    assert out["ts_tz_date"].to_list() == [date(2023, 3, 12), date(2023, 11, 5), None]
    assert out["ts_day_start"].to_list() == [
        datetime(2023, 3, 12, 5, tzinfo=UTC),
        datetime(2023, 11, 5, 4, tzinfo=UTC),
        None,
    ]
    assert out["ts_day_end"].to_list() == [
        datetime(2023, 3, 13, 3, 59, 59, 999999, tzinfo=UTC),
        datetime(2023, 11, 6, 4, 59, 59, 999999, tzinfo=UTC),
        None,
    ]
    assert frame.columns == ["event_id", "ts"]


def test_with_tz_day_bounds_prefix_and_zone_name() -> None:
    out = with_tz_day_bounds(_frame(), "ts", "America/New_York", prefix="event")
    assert {"event_tz_date", "event_day_start", "event_day_end"} <= set(out.columns)


def test_with_tz_day_bounds_missing_column() -> None:
    with pytest.raises(ValueError):
        with_tz_day_bounds(_frame(), "missing", EASTERN)


def test_with_tz_day_bounds_reads_naive_column_as_utc() -> None:
    frame = pl.DataFrame(
        {"ts": [datetime(2023, 3, 12, 3), datetime(2023, 11, 5, 12)]},
        schema={"ts": pl.Datetime(time_unit="us")},
    )

    out = with_tz_day_bounds(frame, "ts", EASTERN)

    # 03:00 UTC on Mar 12 is still Mar 11 in New York.
    assert out["ts_tz_date"].to_list() == [date(2023, 3, 11), date(2023, 11, 5)]
    assert out["ts_day_start"].to_list() == [
        datetime(2023, 3, 11, 5, tzinfo=UTC),
        datetime(2023, 11, 5, 4, tzinfo=UTC),
    ]
    assert out["ts_day_end"].to_list() == [
        datetime(2023, 3, 12, 4, 59, 59, 999999, tzinfo=UTC),
        datetime(2023, 11, 6, 4, 59, 59, 999999, tzinfo=UTC),
    ]
