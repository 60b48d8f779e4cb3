"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from querywatch.constants.defaults import (
    BASE_URL_DEFAULT,
    DISCARD_STALE_RESPONSES_DEFAULT,
    HISTORY_INTERVAL_DEFAULT,
    HISTORY_LIMIT_DEFAULT,
    LIVE_INTERVAL_DEFAULT,
    SERIES_INTERVAL_DEFAULT,
    STALE_AFTER_MISSED_TICKS_DEFAULT,
    THEME_DEFAULT,
    WINDOW_DEFAULT,
)
from querywatch.constants.enums import TimeWindow
from querywatch.constants.limits import (
    HISTORY_LIMIT_MAX,
    HISTORY_LIMIT_MIN,
    POLL_INTERVAL_MAX,
    POLL_INTERVAL_MIN,
    STALE_AFTER_MISSED_TICKS_MIN,
)
from querywatch.constants.timeouts import REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Backend
    base_url: str = BASE_URL_DEFAULT
    request_timeout_seconds: float = Field(default=REQUEST_TIMEOUT, gt=0)

    # Poll cadences (seconds)
    live_interval_seconds: float = Field(
        default=LIVE_INTERVAL_DEFAULT, ge=POLL_INTERVAL_MIN, le=POLL_INTERVAL_MAX
    )
    series_interval_seconds: float = Field(
        default=SERIES_INTERVAL_DEFAULT, ge=POLL_INTERVAL_MIN, le=POLL_INTERVAL_MAX
    )
    history_interval_seconds: float = Field(
        default=HISTORY_INTERVAL_DEFAULT, ge=POLL_INTERVAL_MIN, le=POLL_INTERVAL_MAX
    )

    # Query parameters
    history_limit: int = Field(
        default=HISTORY_LIMIT_DEFAULT, ge=HISTORY_LIMIT_MIN, le=HISTORY_LIMIT_MAX
    )
    default_window: TimeWindow = TimeWindow.parse(WINDOW_DEFAULT)

    # Response handling
    discard_stale_responses: bool = DISCARD_STALE_RESPONSES_DEFAULT
    stale_after_missed_ticks: int = Field(
        default=STALE_AFTER_MISSED_TICKS_DEFAULT, ge=STALE_AFTER_MISSED_TICKS_MIN
    )

    # UI preferences
    theme: str = THEME_DEFAULT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return stripped

    @field_validator("default_window", mode="before")
    @classmethod
    def _parse_window(cls, value: object) -> TimeWindow:
        if isinstance(value, TimeWindow):
            return value
        return TimeWindow.parse(str(value))


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
