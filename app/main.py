# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the DevOps demo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings, get_settings
from app.exceptions import register_exception_handlers
from app.middleware import RequestLoggingMiddleware
from app.routers import calculator, echo, health, info, root

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format=LOG_FORMAT,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to connect or clean up; startup and shutdown are only logged.
    """
    settings: Settings = app.state.settings
    logger.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION} "
        f"in {settings.ENVIRONMENT} mode"
    )

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings and the uptime reference are captured here and stored on
    app.state; route handlers receive them through dependencies.

    Args:
        settings: Settings to use (defaults to the cached environment settings)

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.APP_NAME,
        description="Minimal demo service: welcome, health, readiness, info, echo and addition endpoints.",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        # Routers register their own trailing-slash variants
        redirect_slashes=False,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Root",
                "description": "Welcome message",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
            {
                "name": "API",
                "description": "Application info, echo and calculator endpoints",
            },
        ],
    )

    application.state.settings = settings
    application.state.started_at = time.monotonic()

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    application.add_middleware(RequestLoggingMiddleware)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    register_exception_handlers(application)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    application.include_router(root.router, tags=["Root"])

    application.include_router(health.router, tags=["Health"])

    application.include_router(info.router, prefix="/api", tags=["API"])

    application.include_router(echo.router, prefix="/api", tags=["API"])

    application.include_router(calculator.router, prefix="/api", tags=["API"])

    return application


configure_logging(get_settings())

app = create_app()
