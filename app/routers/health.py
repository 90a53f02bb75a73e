# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from pydantic import BaseModel

from app.dependencies import SettingsDep, UptimeDep
from app.routing import ExpressRouter
from lib.utils import utc_timestamp

router = ExpressRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    uptime: float
    timestamp: str
    service: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    message: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, uptime: UptimeDep):
    """
    Health check endpoint.

    Returns liveness status and process uptime in seconds for load
    balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        uptime=uptime,
        timestamp=utc_timestamp(),
        service=settings.SERVICE_NAME,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    The service has no backing dependencies, so once it is serving
    requests it is ready.
    """
    return ReadinessResponse(
        status="ready",
        message="Application is ready to accept requests",
    )
