"""Stream manager: one supervised polling loop per data source.

A stream pairs a fetch function, a decode step and a cadence. Failures of any
kind are soft: they are reported to the observer and the stream simply waits
for its next tick. Nothing is retried early and nothing is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from querywatch.constants.enums import FailureKind, StreamName
from querywatch.controllers.base.errors import (
    DecodeError,
    HttpError,
    MonitoringApiError,
    TransportError,
)
from querywatch.streams.health import StreamObserver
from querywatch.streams.scheduler import ScheduleHandle, Scheduler

logger = logging.getLogger(__name__)

T = TypeVar("T")


def classify_failure(error: BaseException) -> FailureKind:
    """Map an exception onto its :class:`FailureKind`."""
    if isinstance(error, TransportError):
        return FailureKind.TRANSPORT
    if isinstance(error, HttpError):
        return FailureKind.HTTP
    if isinstance(error, DecodeError):
        return FailureKind.DECODE
    return FailureKind.UNEXPECTED


class StreamManager(Generic[T]):
    """Polls one endpoint on a fixed cadence and hands decoded results on.

    Responses that land after :meth:`detach` are dropped. With
    ``discard_stale=True`` a response is also dropped when a newer request of
    the same stream has already been applied; otherwise the last response to
    complete wins, even if it was issued earlier.
    """

    def __init__(
        self,
        name: StreamName,
        *,
        fetch: Callable[[], Awaitable[Any]],
        decode: Callable[[Any], T],
        interval_seconds: float,
        scheduler: Scheduler,
        observer: StreamObserver | None = None,
        discard_stale: bool = False,
        label: str | None = None,
    ) -> None:
        self.name = name
        self.interval_seconds = interval_seconds
        self.label = label or name.value
        self._fetch = fetch
        self._decode = decode
        self._scheduler = scheduler
        self._observer = observer
        self._discard_stale = discard_stale
        self._handle: ScheduleHandle | None = None
        self._on_success: Callable[[T], Any] | None = None
        self._issued = 0
        self._applied = 0

    def __repr__(self) -> str:
        state = "attached" if self.is_attached else "detached"
        return f"<StreamManager {self.label} every {self.interval_seconds}s {state}>"

    @property
    def is_attached(self) -> bool:
        return self._on_success is not None

    @property
    def issued(self) -> int:
        """Number of requests issued so far."""
        return self._issued

    def attach(self, on_success: Callable[[T], Any]) -> Callable[[], None]:
        """Start polling and deliver decoded results to ``on_success``.

        Returns:
            The :meth:`detach` callable.

        Raises:
            RuntimeError: If the stream is already attached.
        """
        if self.is_attached:
            raise RuntimeError(f"Stream {self.label} is already attached")
        self._on_success = on_success
        if self._observer is not None:
            self._observer.on_attach(self.name)
        self._handle = self._scheduler.start(self.interval_seconds, self._tick, name=self.label)
        logger.debug("Attached stream %s", self.label)
        return self.detach

    def detach(self) -> None:
        """Stop polling. In-flight requests finish but their results are dropped."""
        if not self.is_attached:
            return
        self._on_success = None
        if self._handle is not None:
            self._scheduler.stop(self._handle)
            self._handle = None
        logger.debug("Detached stream %s", self.label)

    async def refresh(self) -> None:
        """Run one out-of-band poll without touching the cadence."""
        if self.is_attached:
            await self._tick()

    async def _tick(self) -> None:
        self._issued += 1
        sequence = self._issued
        try:
            payload = await self._fetch()
            decoded = self._decode(payload)
        except MonitoringApiError as exc:
            self._report_failure(classify_failure(exc), exc)
            return
        except Exception as exc:
            self._report_failure(FailureKind.UNEXPECTED, exc)
            return

        on_success = self._on_success
        if on_success is None:
            logger.debug("Dropping late %s response #%d after detach", self.label, sequence)
            return
        if self._discard_stale and sequence < self._applied:
            logger.debug(
                "Dropping out-of-order %s response #%d (already applied #%d)",
                self.label,
                sequence,
                self._applied,
            )
            return

        self._applied = max(self._applied, sequence)
        on_success(decoded)
        if self._observer is not None:
            self._observer.on_success(self.name)

    def _report_failure(self, kind: FailureKind, error: BaseException) -> None:
        if not self.is_attached:
            return
        if self._observer is not None:
            self._observer.on_failure(self.name, kind, error)
        else:
            logger.debug("Stream %s poll failed (%s): %s", self.label, kind.value, error)
