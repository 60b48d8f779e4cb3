"""Timeout constants for the TUI.

All timeout values for HTTP requests and shutdown.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

REQUEST_TIMEOUT: Final = 5.0
CONNECT_TIMEOUT: Final = 2.0

# ============================================================================
# Shutdown
# ============================================================================

SHUTDOWN_DRAIN_TIMEOUT: Final = 2.0

__all__ = [
    "CONNECT_TIMEOUT",
    "REQUEST_TIMEOUT",
    "SHUTDOWN_DRAIN_TIMEOUT",
]
