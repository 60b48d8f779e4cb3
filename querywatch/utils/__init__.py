"""Utility functions for querywatch."""

from querywatch.utils.formatting import (
    fmt_datetime,
    fmt_duration,
    fmt_optional_count,
    fmt_time,
)

__all__ = [
    # Formatting
    "fmt_datetime",
    "fmt_duration",
    "fmt_optional_count",
    "fmt_time",
]
