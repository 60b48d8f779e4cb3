"""Screens for querywatch."""

from querywatch.screens.monitoring import MonitoringScreen

__all__ = ["MonitoringScreen"]
