"""
API Routes — Event Source Endpoints

GET /api/events builds a fresh batch on every call. Nothing is cached
or persisted between requests.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.errors import GenerationFailure
from backend.generator import list_events

from .schemas import ErrorResponse, EventsResponse, HealthResponse


logger = logging.getLogger(__name__)

router = APIRouter()


def build_events_payload() -> Dict[str, Any]:
    """
    Generate a batch and serialize it into the response envelope.

    Serialization happens here so that every failure on the way to the
    JSON body is reported the same way.

    Raises:
        GenerationFailure: If generation, envelope validation or serialization fails
    """
    try:
        events = list_events(window_hours=settings.EVENT_WINDOW_HOURS)
        response = EventsResponse(
            events=events,
            timestamp=datetime.now(timezone.utc),
            count=len(events),
        )
        return response.model_dump(mode="json")
    except Exception as e:
        raise GenerationFailure(str(e)) from e


async def generation_failure_handler(request: Request, exc: GenerationFailure) -> JSONResponse:
    """Turn a GenerationFailure into the structured 500 body."""
    logger.error(f"Event generation failed for {request.url.path}: {exc}", exc_info=exc)
    body = ErrorResponse(error=GenerationFailure.public_message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


@router.get(
    "/api/events",
    response_model=EventsResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Event generation failed"},
    },
    summary="List simulated world events",
    description="Fabricates one event per template with random region, source, severity and time.",
)
async def get_events() -> JSONResponse:
    """
    List simulated world events.

    - Exactly one event per template
    - Sorted most recent first
    - Different random values on every call
    """
    payload = build_events_payload()
    logger.debug(f"Generated {payload['count']} events")
    return JSONResponse(content=payload)


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    """Health check endpoint. The event source has no external dependencies."""
    return HealthResponse(
        status="healthy",
        service=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
    )
