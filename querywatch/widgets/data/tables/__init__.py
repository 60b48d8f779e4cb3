"""Data table widgets."""

from querywatch.widgets.data.tables.custom_data_table import CustomDataTable

__all__ = ["CustomDataTable"]
