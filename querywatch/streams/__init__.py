"""Multi-cadence polling engine."""

from querywatch.streams.engine import MonitoringEngine
from querywatch.streams.health import StreamHealth, StreamObserver, StreamStats
from querywatch.streams.scheduler import ScheduleHandle, Scheduler
from querywatch.streams.stream import StreamManager, classify_failure
from querywatch.streams.view_state import ViewStateAggregator
from querywatch.streams.window import WindowController

__all__ = [
    "MonitoringEngine",
    "ScheduleHandle",
    "Scheduler",
    "StreamHealth",
    "StreamManager",
    "StreamObserver",
    "StreamStats",
    "ViewStateAggregator",
    "WindowController",
    "classify_failure",
]
