"""Metrics parser - decodes raw JSON payloads into wire models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from querywatch.constants.limits import HISTORY_PAGE_SIZE
from querywatch.constants.values import (
    HISTORY_PATH,
    LIVE_METRICS_PATH,
    TIMESERIES_PATH,
)
from querywatch.controllers.base.errors import DecodeError
from querywatch.models.metrics import (
    DurationPoint,
    History,
    LiveMetrics,
    QueryRow,
    Series,
)

logger = logging.getLogger(__name__)


class MetricsParser:
    """Decodes monitoring payloads.

    Any shape mismatch raises :class:`DecodeError` for the whole payload; a
    partially valid page is never returned.
    """

    _SERIES_ADAPTER = TypeAdapter(list[DurationPoint])
    _HISTORY_ADAPTER = TypeAdapter(list[QueryRow])

    @staticmethod
    def _require_list(endpoint: str, payload: Any) -> list[Any]:
        if not isinstance(payload, list):
            raise DecodeError(endpoint, f"expected a JSON array, got {type(payload).__name__}")
        return payload

    @staticmethod
    def parse_live(payload: Any) -> LiveMetrics:
        """Decode the live KPI object."""
        if not isinstance(payload, dict):
            raise DecodeError(
                LIVE_METRICS_PATH,
                f"expected a JSON object, got {type(payload).__name__}",
            )
        try:
            return LiveMetrics.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(LIVE_METRICS_PATH, str(exc)) from exc

    @classmethod
    def parse_series(cls, payload: Any) -> Series:
        """Decode the duration series, ordered by timestamp ascending."""
        items = cls._require_list(TIMESERIES_PATH, payload)
        try:
            points = cls._SERIES_ADAPTER.validate_python(items)
        except ValidationError as exc:
            raise DecodeError(TIMESERIES_PATH, str(exc)) from exc
        if any(a.timestamp > b.timestamp for a, b in zip(points, points[1:])):
            logger.debug("Series arrived out of order, sorting %d points", len(points))
            points = sorted(points, key=lambda point: point.timestamp)
        return tuple(points)

    @classmethod
    def parse_history(cls, payload: Any, limit: int = HISTORY_PAGE_SIZE) -> History:
        """Decode the history page, truncated to ``limit`` rows."""
        items = cls._require_list(HISTORY_PATH, payload)
        try:
            rows = cls._HISTORY_ADAPTER.validate_python(items)
        except ValidationError as exc:
            raise DecodeError(HISTORY_PATH, str(exc)) from exc

        seen: set[str] = set()
        for row in rows:
            if row.query_id in seen:
                raise DecodeError(HISTORY_PATH, f"duplicate queryId {row.query_id!r}")
            seen.add(row.query_id)

        if len(rows) > limit:
            logger.debug("Truncating history page from %d to %d rows", len(rows), limit)
            rows = rows[:limit]
        return tuple(rows)
