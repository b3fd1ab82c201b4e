"""
Events Client — HTTP transport for the dashboard

Fetches GET /api/events with httpx and validates the body against the
EventsResponse contract. Every way a fetch can go wrong surfaces as a
single TransportFailure.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from backend.api.schemas import EventsResponse
from backend.errors import TransportFailure


EVENTS_PATH = "/api/events"

# Base URL used when talking to the app in-process
IN_PROCESS_BASE_URL = "http://world-events.internal"


class EventsClient:
    """
    Async client for the event source.

    Usage:
        async with EventsClient("http://localhost:8000") as client:
            response = await client.fetch_events()

    Pass `transport=httpx.ASGITransport(app=app)` to call an ASGI app
    without a network hop.
    """

    def __init__(
        self,
        base_url: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the client.

        Args:
            base_url: Root URL of the API (defaults to the in-process URL when empty)
            transport: Custom httpx transport (ASGI app, mock, ...)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url or IN_PROCESS_BASE_URL
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout,
        )

    async def fetch_events(self) -> EventsResponse:
        """
        Fetch one batch of events.

        Returns:
            Validated EventsResponse

        Raises:
            TransportFailure: Network error, non-2xx status or invalid body
        """
        try:
            response = await self._client.get(EVENTS_PATH)
        except httpx.HTTPError as e:
            raise TransportFailure(f"Request to {EVENTS_PATH} failed: {e}") from e

        if response.is_error:
            raise TransportFailure(
                f"{EVENTS_PATH} returned HTTP {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportFailure(f"{EVENTS_PATH} returned a non-JSON body") from e

        if isinstance(payload, dict) and payload.get("success") is False:
            raise TransportFailure(
                f"{EVENTS_PATH} reported failure: {payload.get('error', 'unknown error')}",
                status_code=response.status_code,
            )

        try:
            return EventsResponse.model_validate(payload)
        except ValidationError as e:
            raise TransportFailure(
                f"{EVENTS_PATH} returned an invalid body ({e.error_count()} errors)"
            ) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "EventsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _error_message(response: httpx.Response) -> str:
    """Best-effort extraction of the `error` field from a failure body."""
    try:
        payload = response.json()
    except ValueError:
        return response.reason_phrase or "no details"
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return response.reason_phrase or "no details"
