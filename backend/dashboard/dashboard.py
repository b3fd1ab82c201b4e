"""
Dashboard Controller — Refresh, filter and auto-refresh timer

Holds the latest batch of events in memory and re-fetches on demand or
on a recurring asyncio timer.

Concurrency:
- Runs on a single event loop; the only suspension point is the fetch.
- Overlapping refreshes are NOT deduplicated. The last one to complete
  wins, and the first one to complete clears `loading`.
- At most one auto-refresh task exists. It is cancelled and awaited when
  auto-refresh is disabled or the dashboard is unmounted.
"""

import asyncio
import logging
from typing import Optional, Protocol

from backend.api.schemas import EventsResponse
from backend.config import settings
from backend.errors import TransportFailure

from .state import DashboardState, DashboardView, build_view


logger = logging.getLogger(__name__)


class EventSource(Protocol):
    """Anything that can fetch a batch of events (EventsClient, test fakes)."""

    async def fetch_events(self) -> EventsResponse:
        ...


class Dashboard:
    """
    Presentation-layer controller.

    Usage:
        async with Dashboard(EventsClient(url)) as dashboard:
            dashboard.set_filter("Economy")
            await dashboard.set_auto_refresh(True)
            html = render_page(dashboard.view())
    """

    def __init__(
        self,
        source: EventSource,
        interval_s: Optional[float] = None,
    ):
        """
        Initialize the dashboard.

        Args:
            source: Event source to poll
            interval_s: Auto-refresh period (defaults to AUTO_REFRESH_INTERVAL_S)
        """
        if interval_s is None:
            interval_s = settings.AUTO_REFRESH_INTERVAL_S
        if interval_s <= 0:
            raise ValueError(f"interval_s must be > 0, got {interval_s}")

        self.source = source
        self.interval_s = interval_s
        self.state = DashboardState()
        self._timer_task: Optional[asyncio.Task] = None
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    # ---------------- lifecycle ----------------

    async def mount(self) -> None:
        """Run the initial refresh. Later calls are no-ops until unmount()."""
        if self._mounted:
            return
        self._mounted = True
        await self.refresh()

    async def unmount(self) -> None:
        """Stop the auto-refresh timer so nothing mutates state after teardown."""
        await self._cancel_timer()
        self.state.auto_refresh = False
        self._mounted = False

    async def __aenter__(self) -> "Dashboard":
        await self.mount()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.unmount()

    # ---------------- operations ----------------

    async def refresh(self) -> bool:
        """
        Fetch a new batch and replace the event list.

        On failure the previous events are kept and the error is logged.
        `loading` is cleared either way. No retry is attempted.

        Returns:
            True if the event list was replaced
        """
        self.state.loading = True
        try:
            response = await self.source.fetch_events()
        except TransportFailure as e:
            logger.error(f"Error fetching events: {e}")
            self.state.last_error = str(e)
            return False
        else:
            self.state.events = list(response.events)
            self.state.last_updated = response.timestamp
            self.state.last_error = None
            logger.debug(f"Loaded {response.count} events")
            return True
        finally:
            self.state.loading = False

    def set_filter(self, category: str) -> None:
        """Select a category (or "all"). Does not re-fetch."""
        self.state.filter = category

    async def set_auto_refresh(self, enabled: bool) -> None:
        """Start or stop the recurring refresh."""
        self.state.auto_refresh = enabled
        if not enabled:
            await self._cancel_timer()
            return

        if self._timer_task is None or self._timer_task.done():
            self._timer_task = asyncio.create_task(self._auto_refresh_loop())
            logger.info(f"Auto-refresh enabled every {self.interval_s:g}s")

    def view(self) -> DashboardView:
        """Current derived view."""
        return build_view(self.state, self.interval_s)

    # ---------------- timer ----------------

    async def _auto_refresh_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_s)
            try:
                await self.refresh()
            except Exception:
                # Keep the timer alive; refresh() already handles TransportFailure
                logger.exception("Unexpected error during auto-refresh")

    async def _cancel_timer(self) -> None:
        """Cancel the auto-refresh task if one is running."""
        task, self._timer_task = self._timer_task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Auto-refresh disabled")
