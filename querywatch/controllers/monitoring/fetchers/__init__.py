"""Fetchers for the monitoring controller."""

from querywatch.controllers.monitoring.fetchers.metrics_fetcher import MetricsFetcher

__all__ = ["MetricsFetcher"]
