"""KPI widgets."""

from querywatch.widgets.data.kpi.custom_kpi import CustomKPI

__all__ = ["CustomKPI"]
