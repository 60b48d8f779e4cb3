"""Widgets module for querywatch.

- data: Data display widgets (CustomDataTable, CustomKPI)
- display: Display widgets (DurationChart)
"""

from querywatch.widgets._base import (
    BaseWidget,
    StatefulWidget,
)
from querywatch.widgets.data import (
    CustomDataTable,
    CustomKPI,
)
from querywatch.widgets.display import (
    ChartLine,
    DurationChart,
)

__all__ = [
    "BaseWidget",
    "ChartLine",
    "CustomDataTable",
    "CustomKPI",
    "DurationChart",
    "StatefulWidget",
]
