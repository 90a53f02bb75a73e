# =============================================================================
# app/__main__.py - Development Server
# =============================================================================
# Runs the API with uvicorn on API_HOST:API_PORT.
#
# Usage:
#   python -m app
# =============================================================================

import uvicorn

from app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
