"""Monitoring screen configuration - widget IDs, column definitions and window options."""

from __future__ import annotations

from querywatch.constants.enums import TimeWindow

# =============================================================================
# Widget IDs
# =============================================================================

KPI_UNCACHED_ID = "kpi-running-uncached"
KPI_CACHED_ID = "kpi-running-cached"
KPI_NODES_ID = "kpi-cluster-nodes"
WINDOW_SELECT_ID = "window-select"
CHART_ID = "duration-chart"
CHART_PANEL_ID = "duration-panel"
HISTORY_TABLE_ID = "history-table"
HISTORY_PANEL_ID = "history-panel"
UPDATED_LABEL_ID = "updated-label"

# =============================================================================
# KPI titles
# =============================================================================

KPI_UNCACHED_TITLE = "Running (uncached)"
KPI_CACHED_TITLE = "Running (cached)"
KPI_NODES_TITLE = "Cluster nodes"

# =============================================================================
# Chart
# =============================================================================

CHART_TITLE = "Cached vs non-cached duration over time"
HISTORY_TITLE = "Query history"
CACHED_LINE_NAME = "Cached"
UNCACHED_LINE_NAME = "Non-cached"
CACHED_LINE_COLOR = "green"
UNCACHED_LINE_COLOR = "orange"

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(label, key), ...]
# =============================================================================

HISTORY_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("Time", "time"),
    ("Query ID", "query_id"),
    ("Source", "source"),
    ("Cached", "cached"),
    ("Duration", "duration"),
    ("Rows", "rows"),
    ("Status", "status"),
]

# =============================================================================
# Window selector
# =============================================================================

WINDOW_OPTIONS: list[tuple[str, TimeWindow]] = [
    (window.label, window) for window in TimeWindow
]

# =============================================================================
# Timers
# =============================================================================

STALENESS_CHECK_INTERVAL = 1.0
