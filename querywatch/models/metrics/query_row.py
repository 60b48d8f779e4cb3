"""Query history row model."""

from datetime import datetime, timezone
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from querywatch.constants.enums import QuerySource, QueryStatus


class QueryRow(BaseModel):
    """One query in the most-recent-first history page.

    Invariant: ``status`` is RUNNING exactly when ``duration_ms`` is absent.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    started_at: datetime = Field(
        validation_alias=AliasChoices("startedAtIso", "startedAt", "started_at"),
    )
    query_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("queryId", "query_id"),
    )
    source: QuerySource
    cached: bool
    duration_ms: float | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("durationMs", "duration_ms"),
    )
    row_count: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("rows", "rowCount", "row_count"),
    )
    status: QueryStatus

    @field_validator("started_at")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: Any) -> QuerySource:
        return QuerySource.coerce(value)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def _check_duration_matches_status(self) -> "QueryRow":
        running = self.status is QueryStatus.RUNNING
        if running and self.duration_ms is not None:
            raise ValueError("RUNNING query must not carry a duration")
        if not running and self.duration_ms is None:
            raise ValueError(f"{self.status.value} query must carry a duration")
        return self

    @property
    def is_running(self) -> bool:
        return self.status is QueryStatus.RUNNING
