# =============================================================================
# app/routers/echo.py - Echo Endpoint
# =============================================================================
# Returns the decoded request body as received. Useful for checking what a
# proxy or client actually sends.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.dependencies import RequestBodyDep
from app.routing import ExpressRouter
from lib.utils import utc_timestamp

router = ExpressRouter()


class EchoResponse(BaseModel):
    """Echo response (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    received_data: Any = Field(alias="receivedData")
    timestamp: str


@router.post("/echo", response_model=EchoResponse)
async def echo(body: RequestBodyDep):
    """
    Echo the request body back under "receivedData".

    Accepts JSON (any value) and URL-encoded forms. Other content types
    echo as an empty object.
    """
    return EchoResponse(
        message="Echo endpoint",
        received_data=body,
        timestamp=utc_timestamp(),
    )
