"""Tests for the metrics parser."""

from __future__ import annotations

from typing import Any

import pytest

from querywatch.constants.enums import QueryStatus
from querywatch.controllers.base.errors import DecodeError
from querywatch.controllers.monitoring.parsers import MetricsParser


def _history_item(query_id: str, **overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "startedAtIso": "2024-05-01T12:00:00Z",
        "queryId": query_id,
        "source": "REST",
        "cached": False,
        "durationMs": 250,
        "rows": 3,
        "status": "OK",
    }
    item.update(overrides)
    return item


@pytest.mark.unit
@pytest.mark.fast
class TestParseLive:
    """Tests for MetricsParser.parse_live."""

    def test_valid_payload(self) -> None:
        live = MetricsParser.parse_live(
            {
                "runningUncached": 2,
                "runningCached": 5,
                "clusterNodes": 3,
                "updatedAtIso": "2024-05-01T12:00:00Z",
            }
        )
        assert (live.running_uncached, live.running_cached, live.cluster_nodes) == (2, 5, 3)

    @pytest.mark.parametrize("payload", [[], "live", None, 3])
    def test_non_object_rejected(self, payload: Any) -> None:
        with pytest.raises(DecodeError, match="expected a JSON object"):
            MetricsParser.parse_live(payload)

    def test_invalid_fields_rejected(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            MetricsParser.parse_live({"runningUncached": "many"})
        assert exc_info.value.endpoint == "/api/metrics/live"

    def test_counts_are_required(self) -> None:
        with pytest.raises(DecodeError):
            MetricsParser.parse_live({"updatedAt": "2024-05-01T12:00:00Z"})


@pytest.mark.unit
@pytest.mark.fast
class TestParseSeries:
    """Tests for MetricsParser.parse_series."""

    def test_preserves_order_and_nulls(self) -> None:
        series = MetricsParser.parse_series(
            [
                {"tsIso": "2024-05-01T12:00:00Z", "cachedMs": 100, "uncachedMs": None},
                {"tsIso": "2024-05-01T12:01:00Z", "cachedMs": None, "uncachedMs": 300},
            ]
        )
        assert isinstance(series, tuple)
        assert [p.cached_ms for p in series] == [100, None]
        assert [p.uncached_ms for p in series] == [None, 300]

    def test_sorts_out_of_order_points(self) -> None:
        series = MetricsParser.parse_series(
            [
                {"tsIso": "2024-05-01T12:02:00Z", "cachedMs": 3},
                {"tsIso": "2024-05-01T12:00:00Z", "cachedMs": 1},
                {"tsIso": "2024-05-01T12:01:00Z", "cachedMs": 2},
            ]
        )
        assert [p.cached_ms for p in series] == [1, 2, 3]

    def test_empty_series(self) -> None:
        assert MetricsParser.parse_series([]) == ()

    def test_object_rejected(self) -> None:
        with pytest.raises(DecodeError, match="expected a JSON array"):
            MetricsParser.parse_series({"points": []})

    def test_bad_point_fails_whole_payload(self) -> None:
        with pytest.raises(DecodeError):
            MetricsParser.parse_series(
                [
                    {"tsIso": "2024-05-01T12:00:00Z", "cachedMs": 1},
                    {"tsIso": "not-a-time"},
                ]
            )


@pytest.mark.unit
@pytest.mark.fast
class TestParseHistory:
    """Tests for MetricsParser.parse_history."""

    def test_keeps_most_recent_first_order(self) -> None:
        history = MetricsParser.parse_history([_history_item("b"), _history_item("a")])
        assert [row.query_id for row in history] == ["b", "a"]

    def test_running_row(self) -> None:
        history = MetricsParser.parse_history(
            [_history_item("q", status="RUNNING", durationMs=None)]
        )
        assert history[0].status is QueryStatus.RUNNING

    def test_invariant_violation_fails_whole_page(self) -> None:
        with pytest.raises(DecodeError):
            MetricsParser.parse_history(
                [_history_item("ok"), _history_item("bad", status="RUNNING", durationMs=12)]
            )

    def test_row_missing_source_and_cached_rejected(self) -> None:
        item = _history_item("q", status="RUNNING", durationMs=None)
        del item["source"]
        del item["cached"]
        with pytest.raises(DecodeError):
            MetricsParser.parse_history([item])

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_duration_rejected(self, value: float) -> None:
        with pytest.raises(DecodeError):
            MetricsParser.parse_history([_history_item("q", durationMs=value)])

    def test_duplicate_query_id_rejected(self) -> None:
        with pytest.raises(DecodeError, match="duplicate queryId 'q'"):
            MetricsParser.parse_history([_history_item("q"), _history_item("q")])

    def test_truncates_to_limit(self) -> None:
        payload = [_history_item(f"q{i}") for i in range(5)]
        history = MetricsParser.parse_history(payload, limit=3)
        assert [row.query_id for row in history] == ["q0", "q1", "q2"]

    def test_default_limit_is_page_size(self) -> None:
        payload = [_history_item(f"q{i}") for i in range(205)]
        assert len(MetricsParser.parse_history(payload)) == 200
