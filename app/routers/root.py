# =============================================================================
# app/routers/root.py - Root Endpoint
# =============================================================================
# Welcome message confirming the API is up and which version is running.
# =============================================================================

from pydantic import BaseModel

from app.dependencies import SettingsDep
from app.routing import ExpressRouter

router = ExpressRouter()

WELCOME_MESSAGE = "Welcome to DevOps Python Application!"


class WelcomeResponse(BaseModel):
    """Root endpoint response."""
    message: str
    version: str
    status: str


@router.get("/", response_model=WelcomeResponse)
async def root(settings: SettingsDep):
    """
    Root endpoint - returns a welcome message and the API version.
    """
    return WelcomeResponse(
        message=WELCOME_MESSAGE,
        version=settings.APP_VERSION,
        status="running",
    )
