"""
Dashboard State — In-memory model and derived view

The dashboard owns a single mutable DashboardState. Everything shown on
the page (visible events, category options) is derived from it on demand.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from backend.generator import WorldEvent


ALL_CATEGORIES = "all"


@dataclass
class DashboardState:
    """Mutable dashboard state. Replaced wholesale on each successful refresh."""
    events: List[WorldEvent] = field(default_factory=list)
    loading: bool = False
    filter: str = ALL_CATEGORIES
    auto_refresh: bool = False
    last_updated: Optional[datetime] = None
    last_error: Optional[str] = None


@dataclass(frozen=True)
class DashboardView:
    """Read-only snapshot handed to the renderer and the state endpoint."""
    events: List[WorldEvent]
    categories: List[str]
    filter: str
    loading: bool
    auto_refresh: bool
    auto_refresh_interval_s: float
    total_events: int
    last_updated: Optional[datetime] = None
    last_error: Optional[str] = None

    @property
    def visible_count(self) -> int:
        return len(self.events)


def filter_events(events: Iterable[WorldEvent], category: str) -> List[WorldEvent]:
    """
    Restrict events to one category (case-insensitive).

    Args:
        events: Loaded events
        category: Category name, or "all" for no filtering

    Returns:
        Matching events in their original order
    """
    events = list(events)
    if category == ALL_CATEGORIES:
        return events

    wanted = category.lower()
    return [e for e in events if e.category.value.lower() == wanted]


def category_options(events: Iterable[WorldEvent]) -> List[str]:
    """"all" followed by the distinct categories present, in order of first occurrence."""
    seen = dict.fromkeys(e.category.value for e in events)
    return [ALL_CATEGORIES, *seen]


def build_view(state: DashboardState, interval_s: float) -> DashboardView:
    """Derive the displayed view from the current state."""
    return DashboardView(
        events=filter_events(state.events, state.filter),
        categories=category_options(state.events),
        filter=state.filter,
        loading=state.loading,
        auto_refresh=state.auto_refresh,
        auto_refresh_interval_s=interval_s,
        total_events=len(state.events),
        last_updated=state.last_updated,
        last_error=state.last_error,
    )
