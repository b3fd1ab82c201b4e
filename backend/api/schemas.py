"""
Pydantic Schemas — API Request/Response Models

Wire contract for GET /api/events and the dashboard control endpoints.

Constraints:
- count: Must equal len(events)
- timestamp: UTC, ISO-8601 with milliseconds and "Z"
- success: true on 200, false on 500
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from backend.generator import WorldEvent
from backend.generator.schemas import format_timestamp


# ============================================================================
# Event Source
# ============================================================================

class EventsResponse(BaseModel):
    """Successful GET /api/events body."""
    success: Literal[True] = True
    events: List[WorldEvent]
    timestamp: datetime = Field(..., description="Server generation time (UTC)")
    count: int = Field(..., ge=0)

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def count_matches_events(self):
        """Reject bodies whose count disagrees with the event list."""
        if self.count != len(self.events):
            raise ValueError(
                f"count ({self.count}) does not match number of events ({len(self.events)})"
            )
        return self

    @field_serializer("timestamp", when_used="json")
    def serialize_timestamp(self, v: datetime) -> str:
        return format_timestamp(v)


class ErrorResponse(BaseModel):
    """Failure body for GET /api/events."""
    success: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    environment: str


# ============================================================================
# Dashboard Control
# ============================================================================

class FilterRequest(BaseModel):
    """Body for POST /dashboard/filter."""
    category: str = Field(..., min_length=1, description="'all' or a category name")


class AutoRefreshRequest(BaseModel):
    """Body for POST /dashboard/auto-refresh."""
    enabled: bool


class DashboardStateResponse(BaseModel):
    """Snapshot of the server-side dashboard."""
    loading: bool
    filter: str
    auto_refresh: bool
    auto_refresh_interval_s: float
    total_events: int
    visible_count: int
    categories: List[str]
    events: List[WorldEvent]
    last_updated: Optional[datetime] = None
    last_error: Optional[str] = None
