"""Monitoring screen."""

from querywatch.screens.monitoring.monitoring_screen import MonitoringScreen

__all__ = ["MonitoringScreen"]
