# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# Cross-cutting request handling that runs for every route, matched or not.
# =============================================================================

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from lib.utils import utc_timestamp

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per inbound request before it is dispatched.

    Format: "<ISO-8601 timestamp> - <METHOD> <path>". The request itself
    is passed on untouched.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        logger.info(f"{utc_timestamp()} - {request.method} {request.url.path}")
        return await call_next(request)
