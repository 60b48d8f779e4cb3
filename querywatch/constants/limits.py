"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

HISTORY_PAGE_SIZE: Final = 200
MAX_ROWS_DISPLAY: Final = 1000

# ============================================================================
# Validation limits
# ============================================================================

POLL_INTERVAL_MIN: Final = 0.5
POLL_INTERVAL_MAX: Final = 3600.0
HISTORY_LIMIT_MIN: Final = 1
HISTORY_LIMIT_MAX: Final = 500
STALE_AFTER_MISSED_TICKS_MIN: Final = 1

__all__ = [
    "HISTORY_LIMIT_MAX",
    "HISTORY_LIMIT_MIN",
    "HISTORY_PAGE_SIZE",
    "MAX_ROWS_DISPLAY",
    "POLL_INTERVAL_MAX",
    "POLL_INTERVAL_MIN",
    "STALE_AFTER_MISSED_TICKS_MIN",
]
