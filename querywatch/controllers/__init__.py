"""Controllers module for querywatch.

This module provides the controller that fetches and decodes data from the
query cluster's monitoring API.
"""

from __future__ import annotations

# Base classes
from querywatch.controllers.base import (
    BaseController,
    DecodeError,
    HttpError,
    MonitoringApiError,
    TransportError,
    WorkerResult,
)

# Monitoring domain
from querywatch.controllers.monitoring import (
    MetricsFetcher,
    MetricsParser,
    MonitoringController,
)

__all__ = [
    # Base
    "BaseController",
    # Errors
    "DecodeError",
    "HttpError",
    # Monitoring domain
    "MetricsFetcher",
    "MetricsParser",
    "MonitoringApiError",
    "MonitoringController",
    "TransportError",
    "WorkerResult",
]
