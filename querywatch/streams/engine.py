"""Monitoring engine: wires the streams, the aggregator and the window."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable

from querywatch.constants.enums import StreamName, TimeWindow, ViewSlice
from querywatch.constants.timeouts import SHUTDOWN_DRAIN_TIMEOUT
from querywatch.controllers.monitoring import MonitoringController
from querywatch.models.metrics import History, LiveMetrics, Series
from querywatch.models.state import AppSettings, ViewState
from querywatch.streams.health import StreamHealth
from querywatch.streams.scheduler import Scheduler
from querywatch.streams.stream import StreamManager
from querywatch.streams.view_state import ViewStateAggregator, ViewStateListener
from querywatch.streams.window import WindowController

logger = logging.getLogger(__name__)

_SLICE_FOR_STREAM: dict[StreamName, ViewSlice] = {
    StreamName.LIVE: ViewSlice.LIVE,
    StreamName.SERIES: ViewSlice.SERIES,
    StreamName.HISTORY: ViewSlice.HISTORY,
}


class MonitoringEngine:
    """Root object of the polling engine.

    Owns one controller (and so one HTTP client), one scheduler and one
    aggregator. Live and history streams live for the whole run; the series
    stream is rebuilt by the window controller on every window change.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        controller: MonitoringController | None = None,
        scheduler: Scheduler | None = None,
        health: StreamHealth | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings
        self.controller = controller or MonitoringController(
            settings.base_url,
            timeout=settings.request_timeout_seconds,
            history_limit=settings.history_limit,
        )
        self.scheduler = scheduler or Scheduler()
        self.health = health or StreamHealth(clock=clock)
        self._clock = clock
        self.aggregator = ViewStateAggregator(
            ViewState.initial(settings.default_window),
            clock=clock,
        )

        self.live_stream: StreamManager[LiveMetrics] = StreamManager(
            StreamName.LIVE,
            fetch=self.controller.fetch_live_payload,
            decode=self.controller.decode_live,
            interval_seconds=settings.live_interval_seconds,
            scheduler=self.scheduler,
            observer=self.health,
            discard_stale=settings.discard_stale_responses,
        )
        self.history_stream: StreamManager[History] = StreamManager(
            StreamName.HISTORY,
            fetch=self.controller.fetch_history_payload,
            decode=self.controller.decode_history,
            interval_seconds=settings.history_interval_seconds,
            scheduler=self.scheduler,
            observer=self.health,
            discard_stale=settings.discard_stale_responses,
        )
        self.window_controller = WindowController(
            self.aggregator,
            self._build_series_stream,
            settings.default_window,
        )
        self._started = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_running(self) -> bool:
        return self._started

    def start(self) -> None:
        """Attach all three streams. Must run inside the event loop.

        Raises:
            RuntimeError: If the engine was stopped; its HTTP client is closed.
        """
        if self._started:
            return
        if self.controller.is_closed:
            raise RuntimeError("Monitoring engine was stopped and cannot be restarted")
        self._started = True
        logger.info(
            "Starting monitoring engine against %s (window %s)",
            self.settings.base_url,
            self.window.value,
        )
        self.live_stream.attach(self.aggregator.claim(ViewSlice.LIVE, self.live_stream))
        self.history_stream.attach(
            self.aggregator.claim(ViewSlice.HISTORY, self.history_stream)
        )
        self.window_controller.start()

    async def stop(self) -> None:
        """Detach every stream, drain in-flight polls and close the client."""
        if self._started:
            self._started = False
            self.live_stream.detach()
            self.history_stream.detach()
            self.window_controller.stop()
            self.scheduler.stop_all()
            if not await self.scheduler.wait_idle(timeout=SHUTDOWN_DRAIN_TIMEOUT):
                cancelled = self.scheduler.cancel_in_flight()
                logger.debug("Cancelled %d polls still running at shutdown", cancelled)
                await self.scheduler.wait_idle(timeout=SHUTDOWN_DRAIN_TIMEOUT)
        if not self.controller.is_closed:
            await self.controller.aclose()
        logger.info("Monitoring engine stopped")

    # =========================================================================
    # Operations
    # =========================================================================

    @property
    def state(self) -> ViewState:
        return self.aggregator.state

    @property
    def window(self) -> TimeWindow:
        return self.window_controller.window

    def set_window(self, window: TimeWindow | str) -> bool:
        return self.window_controller.set_window(window)

    async def refresh(self) -> None:
        """Poll every attached stream once, right now."""
        streams: list[StreamManager] = [self.live_stream, self.history_stream]
        if self.window_controller.series_stream is not None:
            streams.append(self.window_controller.series_stream)
        for stream in streams:
            await stream.refresh()

    def subscribe(self, listener: ViewStateListener) -> Callable[[], None]:
        return self.aggregator.subscribe(listener)

    def interval_for(self, stream: StreamName) -> float:
        return {
            StreamName.LIVE: self.settings.live_interval_seconds,
            StreamName.SERIES: self.settings.series_interval_seconds,
            StreamName.HISTORY: self.settings.history_interval_seconds,
        }[stream]

    def staleness(self, now: float | None = None) -> dict[StreamName, bool]:
        """Report, per stream, whether its slice has gone stale."""
        if now is None:
            now = self._clock()
        return {
            stream: self.health.is_stale(
                stream,
                self.interval_for(stream),
                self.settings.stale_after_missed_ticks,
                now=now,
            )
            for stream in _SLICE_FOR_STREAM
        }

    def _build_series_stream(self, window: TimeWindow) -> StreamManager[Series]:
        return StreamManager(
            StreamName.SERIES,
            fetch=functools.partial(self.controller.fetch_series_payload, window),
            decode=self.controller.decode_series,
            interval_seconds=self.settings.series_interval_seconds,
            scheduler=self.scheduler,
            observer=self.health,
            discard_stale=self.settings.discard_stale_responses,
            label=f"series[{window.value}]",
        )
