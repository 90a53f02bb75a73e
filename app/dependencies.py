# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for values captured at startup and for the
# decoded request body. These are injected into route handlers using Depends().
# =============================================================================

import time
from typing import Annotated, Any

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import MalformedBodyError, PayloadTooLargeError
from lib.request_body import BodyDecodeError, decode_body


def get_app_settings(request: Request) -> Settings:
    """
    Get the Settings instance the app was created with.

    Stored on app.state by create_app().
    """
    return request.app.state.settings


def get_uptime(request: Request) -> float:
    """
    Seconds elapsed since the app was created.

    Measured against a monotonic clock, so it never goes negative.
    """
    return max(0.0, time.monotonic() - request.app.state.started_at)


async def get_request_body(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Any:
    """
    Read and decode the request body.

    Raises:
        PayloadTooLargeError: If the body exceeds MAX_BODY_SIZE_KB
        MalformedBodyError: If a JSON or form body cannot be decoded
    """
    max_bytes = settings.max_body_size_bytes

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise PayloadTooLargeError(int(declared), max_bytes)

    raw = await request.body()
    if len(raw) > max_bytes:
        raise PayloadTooLargeError(len(raw), max_bytes)

    try:
        return decode_body(raw, request.headers.get("content-type"))
    except BodyDecodeError as e:
        raise MalformedBodyError(str(e)) from e


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
UptimeDep = Annotated[float, Depends(get_uptime)]
RequestBodyDep = Annotated[Any, Depends(get_request_body)]
