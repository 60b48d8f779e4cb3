"""Repeating-task scheduler for the polling engine.

The scheduler only manages timing. It knows nothing about fetches, decoding
or error handling: a tick is an async callable, started once immediately and
then every ``interval_seconds`` until its handle is stopped.

Ticks of one handle are not serialized. If a tick is slower than the
interval, the next one starts anyway and both run concurrently on the event
loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

TickTask = Callable[[], Awaitable[None]]


@dataclass(eq=False)
class ScheduleHandle:
    """Handle for one repeating task returned by :meth:`Scheduler.start`.

    Attributes:
        name: Label used for task names and logs.
        interval_seconds: Cadence between tick starts.
        active: False once the handle has been stopped.
        ticks: Number of ticks started so far.
    """

    name: str
    interval_seconds: float
    task: TickTask = field(repr=False)
    active: bool = True
    ticks: int = 0
    _timer: asyncio.TimerHandle | None = field(default=None, repr=False)
    _next_at: float = field(default=0.0, repr=False)
    _in_flight: set[asyncio.Task[None]] = field(default_factory=set, repr=False)

    @property
    def in_flight(self) -> int:
        """Number of ticks currently running."""
        return len(self._in_flight)


class Scheduler:
    """Starts and stops independent repeating tasks on the running loop."""

    def __init__(self) -> None:
        self._handles: set[ScheduleHandle] = set()
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def active_handles(self) -> int:
        return len(self._handles)

    def start(
        self,
        interval_seconds: float,
        task: TickTask,
        *,
        name: str = "tick",
    ) -> ScheduleHandle:
        """Start ``task`` now and then every ``interval_seconds``.

        The first tick is scheduled before this method returns.

        Raises:
            ValueError: If ``interval_seconds`` is not positive.
            RuntimeError: If called without a running event loop.
        """
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        loop = asyncio.get_running_loop()
        handle = ScheduleHandle(name=name, interval_seconds=interval_seconds, task=task)
        handle._next_at = loop.time()
        self._handles.add(handle)
        logger.debug("Starting schedule %s every %.2fs", name, interval_seconds)
        self._fire(handle, loop)
        return handle

    def stop(self, handle: ScheduleHandle) -> None:
        """Stop future ticks of ``handle``; running ticks are left alone.

        Calling this more than once is harmless.
        """
        if not handle.active:
            return
        handle.active = False
        if handle._timer is not None:
            handle._timer.cancel()
            handle._timer = None
        self._handles.discard(handle)
        logger.debug(
            "Stopped schedule %s after %d ticks (%d in flight)",
            handle.name,
            handle.ticks,
            handle.in_flight,
        )

    def stop_all(self) -> None:
        for handle in list(self._handles):
            self.stop(handle)

    async def wait_idle(self, timeout: float | None = None) -> bool:
        """Wait for every in-flight tick, including ticks of stopped handles.

        Returns:
            True if all ticks finished, False if ``timeout`` expired first.
        """
        pending = set(self._in_flight)
        if not pending:
            return True
        _, still_running = await asyncio.wait(pending, timeout=timeout)
        return not still_running

    def cancel_in_flight(self) -> int:
        """Cancel running ticks. Used only on shutdown."""
        cancelled = 0
        for tick in list(self._in_flight):
            if not tick.done():
                tick.cancel()
                cancelled += 1
        return cancelled

    def _fire(self, handle: ScheduleHandle, loop: asyncio.AbstractEventLoop) -> None:
        if not handle.active:
            return
        handle.ticks += 1
        tick = loop.create_task(
            self._run_tick(handle),
            name=f"{handle.name}-tick-{handle.ticks}",
        )
        handle._in_flight.add(tick)
        self._in_flight.add(tick)
        tick.add_done_callback(handle._in_flight.discard)
        tick.add_done_callback(self._in_flight.discard)

        # Anchor to the original start so slow callbacks do not drift the cadence.
        handle._next_at += handle.interval_seconds
        if handle._next_at <= loop.time():
            # Loop was blocked past a whole interval: skip the missed ticks.
            handle._next_at = loop.time() + handle.interval_seconds
        handle._timer = loop.call_at(handle._next_at, self._fire, handle, loop)

    @staticmethod
    async def _run_tick(handle: ScheduleHandle) -> None:
        try:
            await handle.task()
        except Exception:
            logger.exception("Tick of schedule %s raised", handle.name)
