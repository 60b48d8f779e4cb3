"""Stream observability: failure counters and staleness per stream."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from querywatch.constants.enums import FailureKind, StreamName

logger = logging.getLogger(__name__)


class StreamObserver(Protocol):
    """Hook receiving the outcome of every stream tick."""

    def on_attach(self, stream: StreamName) -> None: ...

    def on_success(self, stream: StreamName) -> None: ...

    def on_failure(
        self, stream: StreamName, kind: FailureKind, error: BaseException
    ) -> None: ...


@dataclass
class StreamStats:
    """Counters for one stream."""

    successes: int = 0
    failures: Counter[FailureKind] = field(default_factory=Counter)
    consecutive_failures: int = 0
    attached_at: float | None = None
    last_success_at: float | None = None
    last_error: str | None = None

    @property
    def total_failures(self) -> int:
        return sum(self.failures.values())


class StreamHealth:
    """Default :class:`StreamObserver` that counts outcomes and logs failures.

    The first failure after a success logs a warning; repeats log at debug so
    a dead backend does not flood the log. Recovery logs at info.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._stats: dict[StreamName, StreamStats] = {name: StreamStats() for name in StreamName}

    def stats(self, stream: StreamName) -> StreamStats:
        return self._stats[stream]

    def on_attach(self, stream: StreamName) -> None:
        stats = self._stats[stream]
        stats.attached_at = self._clock()
        stats.last_success_at = None
        stats.consecutive_failures = 0

    def on_success(self, stream: StreamName) -> None:
        stats = self._stats[stream]
        if stats.consecutive_failures:
            logger.info(
                "Stream %s recovered after %d failed polls",
                stream.value,
                stats.consecutive_failures,
            )
        stats.successes += 1
        stats.consecutive_failures = 0
        stats.last_success_at = self._clock()

    def on_failure(self, stream: StreamName, kind: FailureKind, error: BaseException) -> None:
        stats = self._stats[stream]
        stats.failures[kind] += 1
        stats.consecutive_failures += 1
        stats.last_error = str(error)
        if stats.consecutive_failures == 1:
            logger.warning("Stream %s poll failed (%s): %s", stream.value, kind.value, error)
        else:
            logger.debug(
                "Stream %s poll failed again (%s, %d in a row): %s",
                stream.value,
                kind.value,
                stats.consecutive_failures,
                error,
            )

    def is_stale(
        self,
        stream: StreamName,
        interval_seconds: float,
        missed_ticks: int,
        now: float | None = None,
    ) -> bool:
        """Return True when ``missed_ticks`` cadences passed without a success.

        Measured from the last success, or from attach time before the first
        one. A stream that was never attached is not stale.
        """
        stats = self._stats[stream]
        reference = stats.last_success_at
        if reference is None:
            reference = stats.attached_at
        if reference is None:
            return False
        current = self._clock() if now is None else now
        return current - reference > interval_seconds * missed_ticks
