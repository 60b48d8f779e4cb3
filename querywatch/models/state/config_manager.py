"""Settings file loading.

Settings live in an optional YAML file. Nothing is written back: the dashboard
keeps no state between runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from querywatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads :class:`AppSettings` from YAML with CLI overrides."""

    DEFAULT_PATH = Path("~/.config/querywatch/settings.yaml")

    @classmethod
    def resolve_path(cls, path: Path | str | None = None) -> Path:
        return Path(path or cls.DEFAULT_PATH).expanduser()

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> AppSettings:
        """Load settings from ``path`` and apply non-None ``overrides``.

        A missing file yields defaults.

        Raises:
            ConfigLoadError: If the file cannot be read, is not a YAML mapping,
                or holds invalid values.
        """
        settings_path = cls.resolve_path(path)
        raw: dict[str, Any] = {}
        if settings_path.exists():
            try:
                with settings_path.open(encoding="utf-8") as handle:
                    loaded = yaml.safe_load(handle)
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc
            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigLoadError(
                    f"{settings_path} must contain a mapping, got {type(loaded).__name__}"
                )
            raw.update(loaded)
        else:
            logger.debug("Settings file %s not found, using defaults", settings_path)

        raw.update({k: v for k, v in (overrides or {}).items() if v is not None})

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
