# =============================================================================
# app/exceptions.py - Custom Exceptions and Exception Handlers
# =============================================================================
# Centralized exception handling for the API. Route handlers never catch their
# own faults: everything bubbles up to the handlers registered here.
#
# Response envelopes:
# - AppException subclasses -> their status code, {"error", "message"?}
# - unknown route or verb   -> 404, {"error": "Not Found", "path"}
# - anything else           -> 500, {"error": "Internal Server Error", "message"}
# =============================================================================

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Base exception for the API.

    All custom exceptions inherit from this class and map to a
    client-visible JSON envelope with a human-readable "error" field.
    """

    def __init__(
        self,
        error: str,
        status_code: int = 500,
        message: str | None = None,
    ):
        super().__init__(message or error)
        self.error = error
        self.status_code = status_code
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"error": self.error}
        if self.message:
            result["message"] = self.message
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class InvalidNumbersError(AppException):
    """Raised when a calculator operand is not a number."""

    def __init__(self):
        super().__init__(
            error="Invalid numbers provided",
            status_code=400,
        )


# =============================================================================
# Request Body Exceptions
# =============================================================================

class MalformedBodyError(AppException):
    """Raised when a JSON or form body cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(
            error="Bad Request",
            status_code=400,
            message=reason,
        )


class PayloadTooLargeError(AppException):
    """Raised when a request body exceeds the configured limit."""

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            error="Payload Too Large",
            status_code=413,
            message=f"Request body is {size_bytes} bytes (max: {max_bytes})",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def app_exception_handler(
    request: Request,
    exc: AppException
) -> JSONResponse:
    """
    Convert AppException to JSON response.

    These are client errors, so they are logged without a traceback.
    """
    logger.warning(f"{exc.error} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing misses and other framework HTTP errors.

    An unknown path and a known path with an unsupported verb both get the
    same 404 envelope.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "path": request.url.path,
            }
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Last-resort handler for unexpected exceptions.

    The traceback goes to the server log; the client only sees the message.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": str(exc),
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all global exception handlers on the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
