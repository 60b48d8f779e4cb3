"""Wire models for the three monitoring endpoints."""

from querywatch.models.metrics.duration_point import DurationPoint
from querywatch.models.metrics.live_metrics import LiveMetrics
from querywatch.models.metrics.query_row import QueryRow

Series = tuple[DurationPoint, ...]
History = tuple[QueryRow, ...]

__all__ = [
    "DurationPoint",
    "History",
    "LiveMetrics",
    "QueryRow",
    "Series",
]
