"""Unit tests for the ViewState snapshot."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from querywatch.constants.enums import TimeWindow, ViewSlice
from querywatch.models.metrics import DurationPoint, LiveMetrics
from querywatch.models.state import ViewState

_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _point() -> DurationPoint:
    return DurationPoint(timestamp=_NOW, cached_ms=10.0, uncached_ms=20.0)


@pytest.mark.unit
@pytest.mark.fast
class TestViewState:
    """Tests for ViewState."""

    def test_initial_state(self) -> None:
        state = ViewState.initial(TimeWindow.H6, now=_NOW)
        assert state.window is TimeWindow.H6
        assert state.series == ()
        assert state.history == ()
        assert state.revision == 0
        assert state.live.updated_at == _NOW
        assert state.last_update(ViewSlice.LIVE) is None

    def test_with_slice_replaces_only_that_slice(self) -> None:
        state = ViewState.initial(now=_NOW)
        live = LiveMetrics(running_uncached=1, running_cached=0, cluster_nodes=0, updated_at=_NOW)

        updated = state.with_slice(ViewSlice.LIVE, live, at=5.0)

        assert updated.live is live
        assert updated.series is state.series
        assert updated.history is state.history
        assert updated.revision == 1
        assert updated.last_update(ViewSlice.LIVE) == 5.0
        assert state.revision == 0

    def test_with_window_clears_series(self) -> None:
        state = ViewState.initial(now=_NOW).with_slice(ViewSlice.SERIES, (_point(),), at=1.0)

        switched = state.with_window(TimeWindow.M15)

        assert switched.window is TimeWindow.M15
        assert switched.series == ()
        assert switched.last_update(ViewSlice.SERIES) is None
        assert switched.revision == state.revision + 1

    def test_snapshot_is_immutable(self) -> None:
        state = ViewState.initial(now=_NOW)
        with pytest.raises(AttributeError):
            state.window = TimeWindow.H24  # type: ignore[misc]
