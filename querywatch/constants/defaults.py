"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Backend defaults
# ============================================================================

BASE_URL_DEFAULT: Final = "http://localhost:8080"
WINDOW_DEFAULT: Final = "1h"
HISTORY_LIMIT_DEFAULT: Final = 200

# ============================================================================
# Poll cadences (seconds)
# ============================================================================

LIVE_INTERVAL_DEFAULT: Final = 3.0
SERIES_INTERVAL_DEFAULT: Final = 8.0
HISTORY_INTERVAL_DEFAULT: Final = 6.0

# ============================================================================
# Staleness / sequencing defaults
# ============================================================================

STALE_AFTER_MISSED_TICKS_DEFAULT: Final = 3
DISCARD_STALE_RESPONSES_DEFAULT: Final = False

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
LOG_LEVEL_DEFAULT: Final = "WARNING"

__all__ = [
    "BASE_URL_DEFAULT",
    "DISCARD_STALE_RESPONSES_DEFAULT",
    "HISTORY_INTERVAL_DEFAULT",
    "HISTORY_LIMIT_DEFAULT",
    "LIVE_INTERVAL_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "SERIES_INTERVAL_DEFAULT",
    "STALE_AFTER_MISSED_TICKS_DEFAULT",
    "THEME_DEFAULT",
    "WINDOW_DEFAULT",
]
