"""DurationChart widget - cached vs uncached query durations over time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple

from textual_plotext import PlotextPlot

_MAX_X_TICKS = 6
_Y_TICKS = 5

Segment = list[tuple[int, float]]


class ChartLine(NamedTuple):
    """One named line, already split into gap-free segments."""

    name: str
    color: str
    segments: list[Segment]


def _tick_indexes(count: int, max_ticks: int = _MAX_X_TICKS) -> list[int]:
    if count <= 0:
        return []
    tick_count = min(max_ticks, count)
    if tick_count == 1:
        return [0]
    return sorted({round(i * (count - 1) / (tick_count - 1)) for i in range(tick_count)})


class DurationChart(PlotextPlot):
    """Line chart of query durations indexed by sample position.

    Each line is drawn segment by segment so a missing sample leaves a gap
    instead of a straight line bridging it.
    """

    DEFAULT_CSS = """
    DurationChart {
        height: 1fr;
        min-height: 10;
        width: 1fr;
    }
    """

    def __init__(
        self,
        *,
        y_formatter: Callable[[float], str] = str,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._y_formatter = y_formatter
        self.chart_title = ""
        self.point_count = 0

    def plot_lines(self, labels: Sequence[str], lines: Sequence[ChartLine]) -> None:
        """Redraw the chart from scratch.

        Args:
            labels: X-axis label per sample index.
            lines: Lines to draw over those indexes.
        """
        plt = self.plt
        plt.clear_data()
        plt.title(self.chart_title)
        self.point_count = len(labels)

        peak = 0.0
        for line in lines:
            first = True
            for segment in line.segments:
                xs = [index for index, _ in segment]
                ys = [value for _, value in segment]
                peak = max(peak, *ys)
                if len(segment) == 1:
                    plt.scatter(xs, ys, color=line.color, marker="dot", label=line.name if first else None)
                else:
                    plt.plot(xs, ys, color=line.color, marker="braille", label=line.name if first else None)
                first = False

        tick_indexes = _tick_indexes(len(labels))
        if tick_indexes:
            plt.xticks(tick_indexes, [labels[index] for index in tick_indexes])
        if peak > 0:
            y_ticks = [peak * step / (_Y_TICKS - 1) for step in range(_Y_TICKS)]
            plt.yticks(y_ticks, [self._y_formatter(value) for value in y_ticks])
        self.refresh()
