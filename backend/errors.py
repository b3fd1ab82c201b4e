"""
Error Taxonomy

- GenerationFailure: server side, raised when building the events payload fails
- TransportFailure: client side, network error or unusable response
"""

from typing import Optional


class WorldEventsError(Exception):
    """Base class for all application errors."""


class GenerationFailure(WorldEventsError):
    """The event source could not produce a response."""

    public_message = "Failed to fetch events"


class TransportFailure(WorldEventsError):
    """The dashboard could not fetch events from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
