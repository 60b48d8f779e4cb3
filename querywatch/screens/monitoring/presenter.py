"""Monitoring screen presenter - projects the view state into display values.

Everything here is pure: the screen calls these functions with the current
:class:`ViewState` and pushes the results into its widgets.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from querywatch.constants.enums import QueryStatus, StreamName
from querywatch.constants.values import (
    CACHED_BADGE,
    NO_HISTORY_TEXT,
    STALE_MARKER,
    UNCACHED_BADGE,
)
from querywatch.models.metrics import History, LiveMetrics, QueryRow, Series
from querywatch.screens.monitoring.config import (
    CACHED_LINE_COLOR,
    CACHED_LINE_NAME,
    HISTORY_TABLE_COLUMNS,
    UNCACHED_LINE_COLOR,
    UNCACHED_LINE_NAME,
)
from querywatch.utils.formatting import (
    fmt_datetime,
    fmt_duration,
    fmt_optional_count,
    fmt_time,
)
from querywatch.widgets.display import ChartLine

HistoryRow = tuple[str, ...]


# =============================================================================
# Chart
# =============================================================================


@dataclass(frozen=True)
class ChartPoint:
    """One chart sample; a None duration is a gap, not a zero."""

    label: str
    cached_ms: float | None
    uncached_ms: float | None
    timestamp: datetime


def to_chart_points(series: Series) -> list[ChartPoint]:
    """Map a duration series onto chart points, keeping order and None values."""
    return [
        ChartPoint(
            label=fmt_time(point.timestamp),
            cached_ms=point.cached_ms,
            uncached_ms=point.uncached_ms,
            timestamp=point.timestamp,
        )
        for point in series
    ]


def split_segments(values: Sequence[float | None]) -> list[list[tuple[int, float]]]:
    """Split a value sequence into runs of consecutive non-None values.

    Each run is a list of ``(index, value)`` pairs, so a chart drawing the runs
    separately never bridges a missing sample.

    >>> split_segments([1.0, None, 2.0, 3.0])
    [[(0, 1.0)], [(2, 2.0), (3, 3.0)]]
    """
    segments: list[list[tuple[int, float]]] = []
    current: list[tuple[int, float]] = []
    for index, value in enumerate(values):
        if value is None:
            if current:
                segments.append(current)
                current = []
            continue
        current.append((index, value))
    if current:
        segments.append(current)
    return segments


def build_chart_lines(points: Sequence[ChartPoint]) -> list[ChartLine]:
    return [
        ChartLine(
            CACHED_LINE_NAME,
            CACHED_LINE_COLOR,
            split_segments([point.cached_ms for point in points]),
        ),
        ChartLine(
            UNCACHED_LINE_NAME,
            UNCACHED_LINE_COLOR,
            split_segments([point.uncached_ms for point in points]),
        ),
    ]


# =============================================================================
# KPI strip
# =============================================================================


@dataclass(frozen=True)
class KpiValues:
    running_uncached: str
    running_cached: str
    cluster_nodes: str
    updated_label: str


def kpi_values(live: LiveMetrics) -> KpiValues:
    """Format the live snapshot for the KPI strip."""
    return KpiValues(
        running_uncached=str(live.running_uncached),
        running_cached=str(live.running_cached),
        cluster_nodes=str(live.cluster_nodes),
        updated_label=f"updated {fmt_time(live.updated_at)}",
    )


# =============================================================================
# History table
# =============================================================================


def history_row(row: QueryRow) -> HistoryRow:
    return (
        fmt_datetime(row.started_at),
        row.query_id,
        row.source.value,
        CACHED_BADGE if row.cached else UNCACHED_BADGE,
        fmt_duration(row.duration_ms),
        fmt_optional_count(row.row_count),
        row.status.value,
    )


def placeholder_row() -> HistoryRow:
    """Single row shown while the history is empty.

    The message sits in the first cell and the remaining cells are blank, so
    it reads as one line across all columns.
    """
    return (NO_HISTORY_TEXT,) + ("",) * (len(HISTORY_TABLE_COLUMNS) - 1)


def history_rows(history: History) -> list[HistoryRow]:
    """Table rows for ``history``, or one placeholder row when it is empty."""
    if not history:
        return [placeholder_row()]
    return [history_row(row) for row in history]


def running_count(history: History) -> int:
    return sum(1 for row in history if row.status is QueryStatus.RUNNING)


def history_summary(history: History) -> str:
    if not history:
        return ""
    return f"{len(history)} queries · {running_count(history)} running"


# =============================================================================
# Staleness
# =============================================================================


def panel_subtitle(base: str, stale: bool) -> str:
    """Panel subtitle text with the stale marker appended when needed."""
    if not stale:
        return base
    if not base:
        return STALE_MARKER
    return f"{base} · {STALE_MARKER}"


def stale_streams(staleness: dict[StreamName, bool]) -> list[str]:
    return [stream.value for stream, stale in staleness.items() if stale]
