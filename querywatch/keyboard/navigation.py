"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# Monitoring Screen Bindings
# ============================================================================

MONITORING_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("1", "select_window('15m')", "15m"),
    ("2", "select_window('1h')", "1h"),
    ("3", "select_window('6h')", "6h"),
    ("4", "select_window('24h')", "24h"),
    ("w", "cycle_window", "Next window"),
    ("t", "focus_table", "History"),
]

__all__ = [
    "MONITORING_SCREEN_BINDINGS",
]
