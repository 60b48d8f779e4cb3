"""Constants module for querywatch.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, endpoint paths)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from querywatch.constants.defaults import (
    BASE_URL_DEFAULT,
    HISTORY_INTERVAL_DEFAULT,
    LIVE_INTERVAL_DEFAULT,
    SERIES_INTERVAL_DEFAULT,
    THEME_DEFAULT,
    WINDOW_DEFAULT,
)
from querywatch.constants.enums import (
    FailureKind,
    QuerySource,
    QueryStatus,
    StreamName,
    TimeWindow,
    ViewSlice,
)
from querywatch.constants.limits import (
    HISTORY_PAGE_SIZE,
    MAX_ROWS_DISPLAY,
)
from querywatch.constants.timeouts import (
    CONNECT_TIMEOUT,
    REQUEST_TIMEOUT,
)
from querywatch.constants.values import (
    APP_TITLE,
    NO_HISTORY_TEXT,
    PLACEHOLDER_DASH,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "BASE_URL_DEFAULT",
    # Timeouts
    "CONNECT_TIMEOUT",
    # Limits
    "HISTORY_INTERVAL_DEFAULT",
    "HISTORY_PAGE_SIZE",
    "LIVE_INTERVAL_DEFAULT",
    "MAX_ROWS_DISPLAY",
    # Display
    "NO_HISTORY_TEXT",
    "PLACEHOLDER_DASH",
    "REQUEST_TIMEOUT",
    "SERIES_INTERVAL_DEFAULT",
    "THEME_DEFAULT",
    "WINDOW_DEFAULT",
    # Enums
    "FailureKind",
    "QuerySource",
    "QueryStatus",
    "StreamName",
    "TimeWindow",
    "ViewSlice",
]
