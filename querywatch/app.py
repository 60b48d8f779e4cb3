"""Main application class for querywatch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from textual.app import App
from textual.binding import Binding

from querywatch.constants import APP_TITLE, THEME_DEFAULT
from querywatch.keyboard.app import APP_BINDINGS
from querywatch.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from querywatch.streams.engine import MonitoringEngine

logger = logging.getLogger(__name__)


class QueryWatchApp(App[None]):
    """Terminal dashboard for a query cluster's monitoring API."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hints for attributes set in __init__
    settings: AppSettings
    engine: MonitoringEngine

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        config_path: Path | None = None,
        engine: MonitoringEngine | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.config_path = config_path
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        self.engine = engine or MonitoringEngine(self.settings)
        self.sub_title = self.settings.base_url

    def _load_settings(self) -> None:
        """Load settings from the YAML file, falling back to defaults."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            logger.warning("Using default settings: %s", exc)
            self.settings = AppSettings()

    def _apply_theme(self) -> None:
        """Apply the configured theme, or the default for unknown names."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            logger.info("Unknown theme %r, using %s", theme_name, THEME_DEFAULT)
            theme_name = THEME_DEFAULT
        self.theme = theme_name

    def on_mount(self) -> None:
        """Start polling and show the dashboard."""
        from querywatch.screens import MonitoringScreen

        self._apply_theme()
        self.engine.start()
        self.push_screen(MonitoringScreen(self.engine))

    async def on_unmount(self) -> None:
        await self.engine.stop()

    async def action_refresh(self) -> None:
        await self.engine.refresh()
