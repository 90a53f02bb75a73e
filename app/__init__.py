# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Startup values and request body injected into routes
# - middleware.py: Request logging
# - routing.py: Express-style route matching (trailing slash, HEAD)
# - exceptions.py: Error envelopes and centralized exception handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# parsing to the lib/ package.
# =============================================================================
