# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - root.py: Welcome message
# - health.py: Health and readiness endpoints
# - info.py: Application info endpoint
# - echo.py: Request body echo endpoint
# - calculator.py: Addition endpoint
#
# Each router is mounted in main.py, the /api ones with a URL prefix.
# =============================================================================

from . import root
from . import health
from . import info
from . import echo
from . import calculator

__all__ = [
    "root",
    "health",
    "info",
    "echo",
    "calculator",
]
