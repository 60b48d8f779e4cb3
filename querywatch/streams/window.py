"""Window controller: restarts only the time-series stream on window change."""

from __future__ import annotations

import logging
from collections.abc import Callable

from querywatch.constants.enums import TimeWindow, ViewSlice
from querywatch.models.metrics import Series
from querywatch.streams.stream import StreamManager
from querywatch.streams.view_state import ViewStateAggregator

logger = logging.getLogger(__name__)

SeriesStreamFactory = Callable[[TimeWindow], StreamManager[Series]]


class WindowController:
    """Holds the selected window and the series stream built for it.

    The window is passed into ``series_factory`` so each stream is bound to
    exactly one window for its whole life. A change never mutates the running
    stream; it is detached and a new one is built.
    """

    def __init__(
        self,
        aggregator: ViewStateAggregator,
        series_factory: SeriesStreamFactory,
        window: TimeWindow = TimeWindow.H1,
    ) -> None:
        self._aggregator = aggregator
        self._series_factory = series_factory
        self._window = window
        self._stream: StreamManager[Series] | None = None
        self._running = False

    @property
    def window(self) -> TimeWindow:
        return self._window

    @property
    def series_stream(self) -> StreamManager[Series] | None:
        return self._stream

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        if self._aggregator.state.window is not self._window:
            self._aggregator.switch_window(self._window)
        self._attach_series_stream()

    def stop(self) -> None:
        self._running = False
        self._detach_series_stream()

    def set_window(self, window: TimeWindow | str) -> bool:
        """Switch to ``window``.

        Returns:
            True if the window changed, False for a same-window no-op.

        Raises:
            ValueError: If ``window`` is not a supported window token.
        """
        new_window = TimeWindow.parse(window)
        if new_window is self._window:
            return False

        logger.info("Switching series window %s -> %s", self._window.value, new_window.value)
        self._detach_series_stream()
        self._window = new_window
        self._aggregator.switch_window(new_window)
        if self._running:
            self._attach_series_stream()
        return True

    def _attach_series_stream(self) -> None:
        stream = self._series_factory(self._window)
        writer = self._aggregator.claim(ViewSlice.SERIES, stream)
        self._stream = stream
        stream.attach(writer)

    def _detach_series_stream(self) -> None:
        stream = self._stream
        if stream is None:
            return
        self._stream = None
        stream.detach()
        self._aggregator.release(ViewSlice.SERIES, stream)
