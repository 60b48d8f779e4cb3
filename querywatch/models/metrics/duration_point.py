"""Time-series bucket model for cached vs uncached query durations."""

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class DurationPoint(BaseModel):
    """One bucket of the duration series.

    ``None`` means no sample existed for that bucket, which is distinct from a
    duration of zero.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: datetime = Field(
        validation_alias=AliasChoices("tsIso", "ts", "timestamp"),
    )
    cached_ms: float | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("cachedMs", "cachedDurationMs", "cached_ms"),
    )
    uncached_ms: float | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("uncachedMs", "uncachedDurationMs", "uncached_ms"),
    )

    @field_validator("timestamp")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
