"""Scalar constants: application strings, endpoint paths and display placeholders."""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "querywatch"
USER_AGENT: Final = "querywatch/0.1"

# ============================================================================
# Backend endpoints
# ============================================================================

LIVE_METRICS_PATH: Final = "/api/metrics/live"
TIMESERIES_PATH: Final = "/api/metrics/timeseries"
HISTORY_PATH: Final = "/api/queries/history"

# ============================================================================
# Display
# ============================================================================

PLACEHOLDER_DASH: Final = "—"
NO_HISTORY_TEXT: Final = "No history yet."
STALE_MARKER: Final = "stale"
CACHED_BADGE: Final = "CACHED"
UNCACHED_BADGE: Final = "UNCACHED"

__all__ = [
    "APP_TITLE",
    "CACHED_BADGE",
    "HISTORY_PATH",
    "LIVE_METRICS_PATH",
    "NO_HISTORY_TEXT",
    "PLACEHOLDER_DASH",
    "STALE_MARKER",
    "TIMESERIES_PATH",
    "UNCACHED_BADGE",
    "USER_AGENT",
]
