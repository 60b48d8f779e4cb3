"""Immutable dashboard snapshot read by the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from querywatch.constants.enums import TimeWindow, ViewSlice
from querywatch.models.metrics import History, LiveMetrics, Series


@dataclass(frozen=True)
class ViewState:
    """The single consistent snapshot ``{live, series, history, window}``.

    Every accepted write produces a new instance, so readers never observe a
    half-applied update.

    Attributes:
        live: Latest live KPI snapshot (zeroed placeholder before first poll).
        series: Duration series for ``window``, ascending by timestamp.
        history: Most-recent-first query page.
        window: Window the series belongs to.
        revision: Incremented on every accepted write.
        slice_updated_at: Monotonic time of the last accepted write per slice.
    """

    live: LiveMetrics
    series: Series = ()
    history: History = ()
    window: TimeWindow = TimeWindow.H1
    revision: int = 0
    slice_updated_at: dict[ViewSlice, float] = field(default_factory=dict, hash=False)

    @classmethod
    def initial(
        cls,
        window: TimeWindow = TimeWindow.H1,
        now: datetime | None = None,
    ) -> ViewState:
        return cls(live=LiveMetrics.placeholder(now), window=window)

    def with_slice(self, view_slice: ViewSlice, value: Any, *, at: float) -> ViewState:
        """Return a copy with one slice replaced wholesale."""
        updated_at = dict(self.slice_updated_at)
        updated_at[view_slice] = at
        return replace(
            self,
            **{view_slice.value: value},
            revision=self.revision + 1,
            slice_updated_at=updated_at,
        )

    def with_window(self, window: TimeWindow) -> ViewState:
        """Return a copy for ``window`` with the series cleared."""
        updated_at = dict(self.slice_updated_at)
        updated_at.pop(ViewSlice.SERIES, None)
        return replace(
            self,
            window=window,
            series=(),
            revision=self.revision + 1,
            slice_updated_at=updated_at,
        )

    def last_update(self, view_slice: ViewSlice) -> float | None:
        return self.slice_updated_at.get(view_slice)
