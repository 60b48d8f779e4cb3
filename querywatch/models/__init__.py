"""Data models for querywatch."""

from querywatch.models.metrics import (
    DurationPoint,
    History,
    LiveMetrics,
    QueryRow,
    Series,
)
from querywatch.models.state import AppSettings, ViewState

__all__ = [
    "AppSettings",
    "DurationPoint",
    "History",
    "LiveMetrics",
    "QueryRow",
    "Series",
    "ViewState",
]
