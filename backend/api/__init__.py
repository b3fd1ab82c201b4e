"""
API Module — FastAPI Event Source & Dashboard

Public API:
- router: Event Source routes (GET /api/events, /health)
- EventsResponse / ErrorResponse: Wire contract

The application itself lives in backend.api.main.
"""

from .routes import router
from .schemas import ErrorResponse, EventsResponse

__all__ = [
    "router",
    "EventsResponse",
    "ErrorResponse",
]
