"""
World Event Schema — Pydantic Models

Defines the immutable value object produced by the generator and
served by GET /api/events.

All timestamps are UTC and serialize as ISO-8601 with millisecond
precision and a trailing "Z".
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .config import Category, NewsSource, Region, Severity


def format_timestamp(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds, e.g. 2026-01-11T12:00:00.123Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class WorldEvent(BaseModel):
    """
    A synthetic world event.

    Built fresh on every fetch and discarded on the next one, so `id`
    is only unique within a single batch.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Batch-unique event token")
    title: str = Field(..., min_length=1)
    description: str
    category: Category
    region: Region
    timestamp: datetime = Field(..., description="Event timestamp (UTC, ISO-8601)")
    source: NewsSource
    severity: Severity

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC; aware ones are converted."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_serializer("timestamp", when_used="json")
    def serialize_timestamp(self, v: datetime) -> str:
        return format_timestamp(v)
