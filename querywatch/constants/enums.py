"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Wire Enums
# =============================================================================

class QuerySource(Enum):
    """Client surface a query was submitted through."""

    JDBC = "JDBC"
    REST = "REST"
    PYTHON = "PYTHON"
    OTHER = "OTHER"

    @classmethod
    def coerce(cls, value: object) -> "QuerySource":
        """Map a free-form backend source string onto a known source.

        Unknown values (``db``, ``cache_s3``, ...) collapse to OTHER.
        """
        if isinstance(value, QuerySource):
            return value
        normalized = str(value or "").strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.OTHER


class QueryStatus(Enum):
    """Lifecycle status of one query in the history page."""

    RUNNING = "RUNNING"
    OK = "OK"
    FAILED = "FAILED"


# =============================================================================
# Time Window
# =============================================================================

class TimeWindow(Enum):
    """Lookback window for the duration time-series."""

    M15 = "15m"
    H1 = "1h"
    H6 = "6h"
    H24 = "24h"

    @classmethod
    def parse(cls, value: "str | TimeWindow") -> "TimeWindow":
        """Parse a window token such as ``"6h"``.

        Raises:
            ValueError: If the token is not one of the supported windows.
        """
        if isinstance(value, TimeWindow):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unsupported time window {value!r}; expected one of "
            f"{', '.join(m.value for m in cls)}"
        )

    @property
    def label(self) -> str:
        return f"Last {self.value}"


# =============================================================================
# Engine Enums
# =============================================================================

class StreamName(Enum):
    """Identifiers of the three polled data streams."""

    LIVE = "live"
    SERIES = "series"
    HISTORY = "history"


class ViewSlice(Enum):
    """Independently written slices of the view state."""

    LIVE = "live"
    SERIES = "series"
    HISTORY = "history"


class FailureKind(Enum):
    """Soft failure categories observed at the stream boundary."""

    TRANSPORT = "transport"
    HTTP = "http"
    DECODE = "decode"
    UNEXPECTED = "unexpected"


__all__ = [
    "FailureKind",
    "QuerySource",
    "QueryStatus",
    "StreamName",
    "TimeWindow",
    "ViewSlice",
]
