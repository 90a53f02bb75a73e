# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the DevOps demo API:
# - test_health.py: Root, health and readiness endpoints
# - test_api.py: Info, echo and calculator endpoints
# - test_errors.py: 404, 400, 413 and 500 envelopes
# - test_routing.py: Trailing slashes and HEAD
# - test_middleware.py: Request logging
# - test_request_body.py: Body decoding (lib/request_body.py)
# - test_utils.py: Number parsing and timestamps (lib/utils.py)
# - test_config.py: Settings loading
#
# Run tests with: pytest
# =============================================================================
