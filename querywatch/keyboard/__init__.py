"""Keyboard bindings module.

Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
- tables: DataTable bindings (DATA_TABLE_BINDINGS)
"""

from querywatch.keyboard.app import APP_BINDINGS
from querywatch.keyboard.navigation import MONITORING_SCREEN_BINDINGS
from querywatch.keyboard.tables import DATA_TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DATA_TABLE_BINDINGS",
    "MONITORING_SCREEN_BINDINGS",
]
