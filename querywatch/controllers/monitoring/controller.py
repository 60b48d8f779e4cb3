"""Monitoring controller - HTTP access to the query cluster's monitoring API."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from querywatch.constants.enums import StreamName, TimeWindow
from querywatch.constants.limits import HISTORY_PAGE_SIZE
from querywatch.constants.timeouts import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from querywatch.constants.values import USER_AGENT
from querywatch.controllers.base import (
    BaseController,
    MonitoringApiError,
    WorkerResult,
)
from querywatch.controllers.monitoring.fetchers import MetricsFetcher
from querywatch.controllers.monitoring.parsers import MetricsParser
from querywatch.models.metrics import History, LiveMetrics, Series

logger = logging.getLogger(__name__)


class MonitoringController(BaseController):
    """Controller for the live, time-series and history endpoints.

    Owns one ``httpx.AsyncClient`` shared by every stream. The raw
    ``fetch_*_payload`` methods are what stream managers poll; decoding is kept
    as a separate step so decode failures surface as their own kind.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        history_limit: int = HISTORY_PAGE_SIZE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            base_url: Backend root, e.g. ``http://localhost:8080``
            timeout: Per-request timeout in seconds
            history_limit: Page size requested from the history endpoint
            transport: Optional transport override (tests use ``httpx.MockTransport``)
        """
        self.base_url = base_url
        self.history_limit = history_limit
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=min(CONNECT_TIMEOUT, timeout)),
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )
        self._fetcher = MetricsFetcher(self._client)
        self._parser = MetricsParser()

    async def __aenter__(self) -> MonitoringController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    # =========================================================================
    # Raw payloads (fetch only)
    # =========================================================================

    async def fetch_live_payload(self) -> Any:
        return await self._fetcher.fetch_live_raw()

    async def fetch_series_payload(self, window: TimeWindow) -> Any:
        return await self._fetcher.fetch_timeseries_raw(window)

    async def fetch_history_payload(self) -> Any:
        return await self._fetcher.fetch_history_raw(self.history_limit)

    # =========================================================================
    # Decode steps
    # =========================================================================

    def decode_live(self, payload: Any) -> LiveMetrics:
        return self._parser.parse_live(payload)

    def decode_series(self, payload: Any) -> Series:
        return self._parser.parse_series(payload)

    def decode_history(self, payload: Any) -> History:
        return self._parser.parse_history(payload, self.history_limit)

    # =========================================================================
    # Decoded fetches
    # =========================================================================

    async def fetch_live(self) -> LiveMetrics:
        return self.decode_live(await self.fetch_live_payload())

    async def fetch_series(self, window: TimeWindow) -> Series:
        return self.decode_series(await self.fetch_series_payload(window))

    async def fetch_history(self) -> History:
        return self.decode_history(await self.fetch_history_payload())

    # =========================================================================
    # BaseController
    # =========================================================================

    async def check_connection(self) -> bool:
        """Return True when the live endpoint answers with a decodable payload."""
        try:
            await self.fetch_live()
        except MonitoringApiError as exc:
            logger.info("Backend %s not reachable: %s", self.base_url, exc)
            return False
        return True

    async def fetch_all(self, window: TimeWindow = TimeWindow.H1) -> dict[str, WorkerResult]:
        """Fetch every source once, concurrently.

        Failures are reported per source; one failing endpoint does not hide
        the others.
        """

        async def _timed(coro: Any) -> WorkerResult:
            started = time.monotonic()
            try:
                data = await coro
            except MonitoringApiError as exc:
                return WorkerResult(
                    success=False,
                    error=str(exc),
                    duration_ms=(time.monotonic() - started) * 1000,
                )
            return WorkerResult(
                success=True,
                data=data,
                duration_ms=(time.monotonic() - started) * 1000,
            )

        live, series, history = await asyncio.gather(
            _timed(self.fetch_live()),
            _timed(self.fetch_series(window)),
            _timed(self.fetch_history()),
        )
        return {
            StreamName.LIVE.value: live,
            StreamName.SERIES.value: series,
            StreamName.HISTORY.value: history,
        }
