"""Display widgets."""

from querywatch.widgets.display.duration_chart import ChartLine, DurationChart

__all__ = [
    "ChartLine",
    "DurationChart",
]
