"""Metrics fetcher - issues GET requests against the monitoring endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from querywatch.constants.enums import TimeWindow
from querywatch.constants.values import (
    HISTORY_PATH,
    LIVE_METRICS_PATH,
    TIMESERIES_PATH,
)
from querywatch.controllers.base.errors import DecodeError, HttpError, TransportError

logger = logging.getLogger(__name__)


class MetricsFetcher:
    """Fetches raw JSON payloads from the monitoring API.

    Every failure is translated into the monitoring error taxonomy so callers
    only deal with :class:`TransportError`, :class:`HttpError` and
    :class:`DecodeError`.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize with a configured client.

        Args:
            client: Async client whose ``base_url`` points at the backend
        """
        self._client = client

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.RequestError as exc:
            raise TransportError(path, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise HttpError(path, response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(path, f"invalid JSON: {exc}") from exc

    async def fetch_live_raw(self) -> Any:
        """Fetch the live KPI payload."""
        return await self._get_json(LIVE_METRICS_PATH)

    async def fetch_timeseries_raw(self, window: TimeWindow) -> Any:
        """Fetch the duration series payload for ``window``."""
        return await self._get_json(TIMESERIES_PATH, params={"window": window.value})

    async def fetch_history_raw(self, limit: int) -> Any:
        """Fetch the most-recent-first history page."""
        return await self._get_json(HISTORY_PATH, params={"limit": limit})
