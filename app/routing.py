# =============================================================================
# app/routing.py - Route Registration
# =============================================================================
# APIRouter that matches paths the way the original Express service did:
# - a trailing slash is accepted ("/health/" serves the same as "/health")
# - every GET route also answers HEAD
#
# The extra slash and HEAD routes are hidden from the OpenAPI schema.
# =============================================================================

from typing import Any, Callable

from fastapi import APIRouter


class ExpressRouter(APIRouter):
    """APIRouter with non-strict trailing slashes and implicit HEAD."""

    def add_api_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        **kwargs: Any,
    ) -> None:
        super().add_api_route(path, endpoint, **kwargs)

        hidden = {**kwargs, "include_in_schema": False}
        if path and not path.endswith("/"):
            super().add_api_route(path + "/", endpoint, **hidden)

        methods = {m.upper() for m in kwargs.get("methods") or ()}
        if "GET" in methods and "HEAD" not in methods:
            hidden["methods"] = ["HEAD"]
            super().add_api_route(path, endpoint, **hidden)
            if path and not path.endswith("/"):
                super().add_api_route(path + "/", endpoint, **hidden)
