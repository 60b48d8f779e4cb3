"""Application settings and view state models."""

from querywatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)
from querywatch.models.state.config_manager import ConfigManager
from querywatch.models.state.view_state import ViewState

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ViewState",
]
