"""
Dashboard Module — Presentation layer for the world event feed

Public API:
- Dashboard: Refresh / filter / auto-refresh controller
- EventsClient: httpx transport for GET /api/events
- render_page: HTML rendering of a DashboardView
- filter_events / category_options: Derived-view helpers
"""

from .client import EventsClient
from .dashboard import Dashboard, EventSource
from .render import render_page
from .state import (
    ALL_CATEGORIES,
    DashboardState,
    DashboardView,
    build_view,
    category_options,
    filter_events,
)

__all__ = [
    "Dashboard",
    "EventSource",
    "EventsClient",
    "render_page",
    "ALL_CATEGORIES",
    "DashboardState",
    "DashboardView",
    "build_view",
    "category_options",
    "filter_events",
]
