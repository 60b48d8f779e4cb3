"""Data display widgets (tables, KPI)."""

from querywatch.widgets.data.kpi import CustomKPI
from querywatch.widgets.data.tables import CustomDataTable

__all__ = [
    "CustomDataTable",
    "CustomKPI",
]
