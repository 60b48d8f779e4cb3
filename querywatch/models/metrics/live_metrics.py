"""Live cluster concurrency snapshot model."""

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LiveMetrics(BaseModel):
    """Instantaneous cluster snapshot shown in the KPI strip.

    Replaced wholesale on every successful poll, never merged per field.
    """

    model_config = ConfigDict(frozen=True)

    running_uncached: int = Field(
        ge=0,
        validation_alias=AliasChoices("runningUncached", "running_uncached"),
    )
    running_cached: int = Field(
        ge=0,
        validation_alias=AliasChoices("runningCached", "running_cached"),
    )
    cluster_nodes: int = Field(
        ge=0,
        validation_alias=AliasChoices("clusterNodes", "cluster_nodes"),
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updatedAtIso", "updatedAt", "updated_at"),
    )

    @field_validator("updated_at")
    @classmethod
    def _normalize_updated_at(cls, value: datetime) -> datetime:
        return _ensure_aware(value)

    @classmethod
    def placeholder(cls, now: datetime | None = None) -> "LiveMetrics":
        """Zeroed snapshot used before the first poll completes."""
        return cls(
            running_uncached=0,
            running_cached=0,
            cluster_nodes=0,
            updated_at=now or datetime.now(timezone.utc),
        )
