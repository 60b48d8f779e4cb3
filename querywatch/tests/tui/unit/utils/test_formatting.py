"""Unit tests for display formatting helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from querywatch.utils.formatting import (
    fmt_datetime,
    fmt_duration,
    fmt_optional_count,
    fmt_time,
)


@pytest.mark.unit
@pytest.mark.fast
class TestFmtDuration:
    """Tests for fmt_duration."""

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (None, "—"),
            (0, "0 ms"),
            (999, "999 ms"),
            (1000, "1.00 s"),
            (1500, "1.50 s"),
            (59_990, "59.99 s"),
            (60_000, "1:00 min"),
            (65_000, "1:05 min"),
            (65_999, "1:05 min"),
            (600_000, "10:00 min"),
        ],
    )
    def test_table(self, ms: float | None, expected: str) -> None:
        assert fmt_duration(ms) == expected

    def test_fractional_milliseconds_round(self) -> None:
        assert fmt_duration(12.4) == "12 ms"
        assert fmt_duration(12.7) == "13 ms"

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (999.4, "999 ms"),
            (999.5, "1.00 s"),
            (999.6, "1.00 s"),
            (59_994, "59.99 s"),
            (59_995, "1:00 min"),
            (59_999.99, "1:00 min"),
            (119_999, "1:59 min"),
        ],
    )
    def test_unit_rollover_never_shows_1000_ms_or_60_s(self, ms: float, expected: str) -> None:
        assert fmt_duration(ms) == expected


@pytest.mark.unit
@pytest.mark.fast
class TestTimestamps:
    """Tests for fmt_time and fmt_datetime."""

    def test_fmt_time_is_local_hours_minutes(self) -> None:
        local = datetime(2024, 5, 1, 14, 7, 33).astimezone()
        assert fmt_time(local) == "14:07"

    def test_fmt_datetime(self) -> None:
        local = datetime(2024, 5, 1, 9, 5).astimezone()
        assert fmt_datetime(local) == "2024-05-01 09:05"

    def test_utc_is_converted_to_local(self) -> None:
        local = datetime(2024, 5, 1, 14, 7).astimezone()

        assert fmt_time(local.astimezone(timezone.utc)) == "14:07"

    def test_none_is_dash(self) -> None:
        assert fmt_time(None) == "—"
        assert fmt_datetime(None) == "—"


@pytest.mark.unit
@pytest.mark.fast
class TestFmtOptionalCount:
    """Tests for fmt_optional_count."""

    def test_none_is_dash(self) -> None:
        assert fmt_optional_count(None) == "—"

    def test_zero_is_kept(self) -> None:
        assert fmt_optional_count(0) == "0"

    def test_integer(self) -> None:
        assert fmt_optional_count(1234) == "1234"
