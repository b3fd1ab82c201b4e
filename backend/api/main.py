"""
FastAPI Application — World Events API & Dashboard

Serves the simulated event feed and the dashboard that consumes it.

CORS: Configured via environment variables.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.dashboard import Dashboard, EventsClient
from backend.errors import GenerationFailure
from .routes import router, generation_failure_handler
from .dashboard_routes import router as dashboard_router, page_router


# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_events_client(app: FastAPI) -> EventsClient:
    """Remote client when EVENTS_API_URL is set, otherwise call this app in-process."""
    if settings.EVENTS_API_URL:
        return EventsClient(settings.EVENTS_API_URL, timeout=settings.REQUEST_TIMEOUT_S)
    return EventsClient(
        # App errors come back as 500 responses instead of escaping the client
        transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),
        timeout=settings.REQUEST_TIMEOUT_S,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"🚀 Starting {settings.PROJECT_NAME}")
    logger.info(f"📍 Running in {settings.ENVIRONMENT} mode")
    logger.info(f"🔗 Events API: {settings.EVENTS_API_URL or 'in-process'}")

    async with build_events_client(app) as client:
        async with Dashboard(client) as dashboard:
            app.state.dashboard = dashboard
            yield
            # Shutdown
            app.state.dashboard = None

    logger.info(f"👋 Shutting down {settings.PROJECT_NAME}")


# Application metadata
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Simulated world events feed and dashboard",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# CORS Configuration — loaded from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


app.add_exception_handler(GenerationFailure, generation_failure_handler)


# Include API routes
app.include_router(router, tags=["Events"])
app.include_router(dashboard_router)
app.include_router(page_router)


@app.get("/ping", tags=["Health"])
async def ping():
    """Lightweight heartbeat. Used by keep-alive pings."""
    return {"status": "ok"}
