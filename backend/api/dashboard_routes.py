"""
Dashboard Routes — Server-side presentation layer

Serves the rendered dashboard page and exposes control endpoints:
- GET / — Rendered HTML page
- GET /dashboard/state — Current state and derived view
- POST /dashboard/refresh — Re-fetch events
- POST /dashboard/filter — Select a category
- POST /dashboard/auto-refresh — Toggle the 30s timer

The Dashboard instance is created and mounted by the app lifespan.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse

from backend.dashboard import Dashboard, render_page

from .schemas import AutoRefreshRequest, DashboardStateResponse, FilterRequest


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
page_router = APIRouter(tags=["Dashboard"])


def get_dashboard(request: Request) -> Dashboard:
    """Dependency returning the mounted dashboard (503 before startup)."""
    dashboard: Optional[Dashboard] = getattr(request.app.state, "dashboard", None)
    if dashboard is None or not dashboard.mounted:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard is not mounted yet.",
        )
    return dashboard


def build_state_response(dashboard: Dashboard) -> DashboardStateResponse:
    view = dashboard.view()
    return DashboardStateResponse(
        loading=view.loading,
        filter=view.filter,
        auto_refresh=view.auto_refresh,
        auto_refresh_interval_s=view.auto_refresh_interval_s,
        total_events=view.total_events,
        visible_count=view.visible_count,
        categories=view.categories,
        events=view.events,
        last_updated=view.last_updated,
        last_error=view.last_error,
    )


@page_router.get("/", response_class=HTMLResponse, summary="Dashboard page")
async def dashboard_page(
    category: Optional[str] = Query(default=None, min_length=1),
    refresh: bool = Query(default=False),
    auto_refresh: Optional[bool] = Query(default=None),
    dashboard: Dashboard = Depends(get_dashboard),
) -> HTMLResponse:
    """
    Render the dashboard.

    Query parameters apply the matching control before rendering:
    category → set_filter, refresh → refresh(), auto_refresh → set_auto_refresh().
    """
    if category is not None:
        dashboard.set_filter(category)
    if auto_refresh is not None:
        await dashboard.set_auto_refresh(auto_refresh)
    if refresh:
        await dashboard.refresh()

    return HTMLResponse(render_page(dashboard.view()))


@router.get("/state", response_model=DashboardStateResponse)
async def get_state(dashboard: Dashboard = Depends(get_dashboard)) -> DashboardStateResponse:
    """Current dashboard state and derived view."""
    return build_state_response(dashboard)


@router.post("/refresh", response_model=DashboardStateResponse)
async def refresh_events(dashboard: Dashboard = Depends(get_dashboard)) -> DashboardStateResponse:
    """
    Re-fetch events now.

    A failed fetch still returns 200: the previous events are kept and
    the failure is reported in `last_error`.
    """
    await dashboard.refresh()
    return build_state_response(dashboard)


@router.post("/filter", response_model=DashboardStateResponse)
async def set_filter(
    request: FilterRequest,
    dashboard: Dashboard = Depends(get_dashboard),
) -> DashboardStateResponse:
    """Select a category, or "all". Does not re-fetch."""
    dashboard.set_filter(request.category)
    return build_state_response(dashboard)


@router.post("/auto-refresh", response_model=DashboardStateResponse)
async def set_auto_refresh(
    request: AutoRefreshRequest,
    dashboard: Dashboard = Depends(get_dashboard),
) -> DashboardStateResponse:
    """Enable or disable the recurring refresh."""
    await dashboard.set_auto_refresh(request.enabled)
    return build_state_response(dashboard)
