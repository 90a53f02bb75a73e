# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import math
import re
from datetime import datetime, timezone


# =============================================================================
# Timestamp Utilities
# =============================================================================

def utc_timestamp(now: datetime | None = None) -> str:
    """
    Format a moment as an ISO-8601 UTC timestamp with millisecond precision.

    Args:
        now: Moment to format (defaults to the current time)

    Returns:
        Timestamp string ending in "Z"

    Example:
        utc_timestamp()  # "2024-01-15T10:30:00.123Z"
    """
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Number Parsing
# =============================================================================

# Plain ASCII decimal literal: optional sign, digits with optional fraction,
# optional exponent. No whitespace, underscores, hex, "inf", "nan" or
# non-ASCII digits such as "\u0665" or "\uff15".
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def parse_number(value: str) -> float | None:
    """
    Parse a string as a finite double, rejecting anything but a full literal.

    "5abc" is rejected as a whole rather than read as 5.

    Args:
        value: Raw text, e.g. a URL path segment

    Returns:
        The parsed float, or None if the text is not a finite number

    Example:
        parse_number("5.5")   # 5.5
        parse_number("1e3")   # 1000.0
        parse_number("abc")   # None
    """
    if not _DECIMAL_LITERAL.fullmatch(value):
        return None

    number = float(value)
    # "1e400" matches the grammar but overflows
    if not math.isfinite(number):
        return None
    return number


# Below this magnitude JavaScript prints integral doubles without an exponent
_JS_PLAIN_INTEGER_LIMIT = 1e21


def as_json_number(value: float) -> int | float:
    """
    Return integral doubles as int so they serialize as "8" rather than "8.0".

    Large magnitudes stay float and keep their exponent form.

    Example:
        as_json_number(8.0)    # 8
        as_json_number(8.7)    # 8.7
        as_json_number(1e308)  # 1e308
    """
    if value.is_integer() and abs(value) < _JS_PLAIN_INTEGER_LIMIT:
        return int(value)
    return value
