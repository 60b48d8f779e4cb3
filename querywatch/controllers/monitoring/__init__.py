"""Monitoring domain: fetchers, parsers and the controller tying them together."""

from querywatch.controllers.monitoring.controller import MonitoringController
from querywatch.controllers.monitoring.fetchers import MetricsFetcher
from querywatch.controllers.monitoring.parsers import MetricsParser

__all__ = ["MetricsFetcher", "MetricsParser", "MonitoringController"]
