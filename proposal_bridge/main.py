"""
Proposal Bridge - FastAPI Application Entry Point.

Receives proposal client records pushed from the inbound topic,
validates and routes them, and publishes the transformed record
to the outbound topic.

Run with:
    uvicorn proposal_bridge.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from proposal_bridge import __version__
from proposal_bridge.core.config import Settings, get_settings, describe_topics
from proposal_bridge.api.webhooks import router as webhook_router, test_router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LOGGERS = ("httpx", "httpcore")


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging(settings: Settings = None) -> logging.Logger:
    """
    Configure application logging.

    Safe to call more than once: the console handler is only added
    when the root logger has none, so reloading the module or running
    under a server that already configured logging does not duplicate
    output. The level is always refreshed from settings.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.DEBUG else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ===========================================
# Application Lifespan
# ===========================================

def publishing_warnings(settings: Settings) -> list:
    """Configuration problems that leave outbound records unsent."""
    if not settings.PUBLISH_ENABLED:
        return ["Publishing disabled - outbound records will only be logged"]
    if not settings.OUTBOUND_PUBLISH_URL:
        return ["PUBLISH_ENABLED is set but OUTBOUND_PUBLISH_URL is empty - records will only be logged"]
    return []


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Log topic wiring on startup."""
    settings = get_settings()
    topics = describe_topics(settings)

    logger.info(
        f"Proposal Bridge {__version__} consuming {topics['inbound_topic']} "
        f"as {topics['consumer_group']}, publishing to {topics['outbound_topic']}"
    )
    for warning in publishing_warnings(settings):
        logger.warning(warning)

    yield

    logger.info("Proposal Bridge stopped")


# ===========================================
# FastAPI Application
# ===========================================

def list_endpoints(app: FastAPI) -> Dict[str, str]:
    """Map route names to "METHOD path" for the API routes of the app."""
    endpoints = {}
    for route in app.routes:
        if isinstance(route, APIRoute) and route.include_in_schema:
            methods = ",".join(sorted(route.methods))
            endpoints[route.name] = f"{methods} {route.path}"
    return endpoints


async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; details are only exposed in debug mode."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) if get_settings().DEBUG else "An error occurred"
        }
    )


def create_app(settings: Settings = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Proposal Bridge",
        description="Event bridge that validates, routes and republishes proposal client records.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(webhook_router)
    app.include_router(test_router)
    app.add_exception_handler(Exception, unhandled_error)

    @app.get("/", tags=["root"], include_in_schema=False)
    async def root():
        """Service name, version and the available endpoints."""
        return {
            "service": "Proposal Bridge",
            "version": __version__,
            "status": "running",
            "endpoints": list_endpoints(app),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "proposal_bridge.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
