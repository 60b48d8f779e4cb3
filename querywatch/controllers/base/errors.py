"""Error taxonomy for monitoring API calls.

All three kinds are soft failures: stream managers catch them, report them to
their observer and wait for the next tick.
"""

from __future__ import annotations


class MonitoringApiError(Exception):
    """Base exception for monitoring endpoint failures."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint


class TransportError(MonitoringApiError):
    """Network unreachable, connection reset or timeout."""


class HttpError(MonitoringApiError):
    """Backend answered with a non-2xx status."""

    def __init__(self, endpoint: str, status_code: int) -> None:
        super().__init__(endpoint, f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(MonitoringApiError):
    """Payload is not JSON or does not match the expected shape."""


__all__ = [
    "DecodeError",
    "HttpError",
    "MonitoringApiError",
    "TransportError",
]
