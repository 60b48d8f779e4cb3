"""Parsers for the monitoring controller."""

from querywatch.controllers.monitoring.parsers.metrics_parser import MetricsParser

__all__ = ["MetricsParser"]
