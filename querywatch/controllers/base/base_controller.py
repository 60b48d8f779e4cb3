"""Base controller with async worker-friendly patterns for querywatch.

Controllers are plain async objects; the Textual layer drives them from
workers and timers so the UI stays responsive while requests are in flight.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for one fetch operation."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Base controller class.

    Subclasses implement connection checking and a one-shot fetch of every
    data source they own.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, WorkerResult]:
        """Fetch all data from the source.

        Returns:
            Mapping of source name to its result
        """
        ...
