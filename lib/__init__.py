# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities with no web framework imports:
# - request_body.py: Content-Type aware body decoding (JSON, URL-encoded forms)
# - utils.py: Shared utilities (timestamps, strict number parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.request_body import BodyDecodeError, decode_body
from lib.utils import as_json_number, parse_number, utc_timestamp

__all__ = [
    # Request body
    "BodyDecodeError",
    "decode_body",
    # Utils
    "as_json_number",
    "parse_number",
    "utc_timestamp",
]
