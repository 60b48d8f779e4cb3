"""Base controller classes and error taxonomy."""

from querywatch.controllers.base.base_controller import (
    BaseController,
    WorkerResult,
)
from querywatch.controllers.base.errors import (
    DecodeError,
    HttpError,
    MonitoringApiError,
    TransportError,
)

__all__ = [
    "BaseController",
    "DecodeError",
    "HttpError",
    "MonitoringApiError",
    "TransportError",
    "WorkerResult",
]
