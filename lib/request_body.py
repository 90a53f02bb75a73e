# =============================================================================
# lib/request_body.py - Request Body Decoding
# =============================================================================
# Turns a raw request body into a plain Python value based on its Content-Type.
#
# Supported media types:
# - application/json, application/*+json  -> any JSON value
# - application/x-www-form-urlencoded     -> dict, bracket keys expanded
#
# Anything else decodes to an empty dict, so handlers always get a value.
# This module has no web framework imports and can be tested in isolation.
# =============================================================================

import json
from typing import Any
from urllib.parse import parse_qsl

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

# Bracket nesting deeper than this is kept as a literal key
MAX_FORM_DEPTH = 5

# Numeric bracket indices up to this value build lists; larger ones stay keys
MAX_FORM_ARRAY_INDEX = 20


class BodyDecodeError(ValueError):
    """Raised when a body claims a supported media type but cannot be decoded."""


# =============================================================================
# Content-Type Handling
# =============================================================================

def parse_content_type(header: str | None) -> tuple[str, str]:
    """
    Split a Content-Type header into media type and charset.

    Example:
        parse_content_type("Application/JSON; charset=latin-1")
        # ("application/json", "latin-1")
    """
    if not header:
        return "", "utf-8"

    media_type, _, params = header.partition(";")
    charset = "utf-8"
    for param in params.split(";"):
        name, _, val = param.strip().partition("=")
        if name.lower() == "charset" and val:
            charset = val.strip('"').lower()
    return media_type.strip().lower(), charset


def is_json_media_type(media_type: str) -> bool:
    """True for application/json and structured-syntax types like application/ld+json."""
    return media_type == JSON_MEDIA_TYPE or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def decode_body(raw: bytes, content_type: str | None) -> Any:
    """
    Decode a raw request body according to its Content-Type header.

    Args:
        raw: Body bytes as received
        content_type: Value of the Content-Type header (may be None)

    Returns:
        The decoded value. Empty bodies and unsupported media types give {}.

    Raises:
        BodyDecodeError: If the body is not valid JSON / text in its charset
    """
    media_type, charset = parse_content_type(content_type)

    if is_json_media_type(media_type):
        return decode_json(raw, charset)
    if media_type == FORM_MEDIA_TYPE:
        return decode_form(raw, charset)
    return {}


def _decode_text(raw: bytes, charset: str) -> str:
    try:
        return raw.decode(charset)
    except LookupError as e:
        raise BodyDecodeError(f"Unsupported charset: {charset}") from e
    except UnicodeDecodeError as e:
        raise BodyDecodeError(f"Body is not valid {charset}: {e.reason}") from e


# =============================================================================
# JSON
# =============================================================================

def _reject_constant(name: str) -> Any:
    raise BodyDecodeError(f"Invalid JSON in request body: {name} is not a JSON value")


def decode_json(raw: bytes, charset: str = "utf-8") -> Any:
    """
    Decode a JSON body. Whitespace-only bodies decode to {}.

    NaN, Infinity and -Infinity are rejected, as is nesting too deep for
    the decoder.

    Raises:
        BodyDecodeError: With the decoder's position-aware message
    """
    text = _decode_text(raw, charset)
    if not text.strip():
        return {}

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise BodyDecodeError(f"Invalid JSON in request body: {e}") from e
    except RecursionError as e:
        raise BodyDecodeError("Invalid JSON in request body: nesting too deep") from e


# =============================================================================
# URL-Encoded Forms
# =============================================================================

def decode_form(raw: bytes, charset: str = "utf-8") -> dict[str, Any]:
    """
    Decode an x-www-form-urlencoded body into a dict.

    Example:
        decode_form(b"user[name]=ann&tags[]=a&tags[]=b")
        # {"user": {"name": "ann"}, "tags": ["a", "b"]}
    """
    text = _decode_text(raw, charset)
    pairs = parse_qsl(text, keep_blank_values=True, encoding=charset)
    return expand_form_pairs(pairs)


def split_form_key(key: str) -> list[str]:
    """
    Split a bracketed form key into its path segments.

    Keys that are not well formed, or nest deeper than MAX_FORM_DEPTH,
    are returned whole as a single segment.

    Example:
        split_form_key("a[b][]")   # ["a", "b", ""]
        split_form_key("a[b")      # ["a[b"]
    """
    head, bracket, rest = key.partition("[")
    if not bracket or not head:
        return [key]

    segments = [head]
    rest = bracket + rest
    while rest:
        if not rest.startswith("[") or "]" not in rest:
            return [key]
        inner, _, rest = rest[1:].partition("]")
        if "[" in inner:
            return [key]
        segments.append(inner)

    if len(segments) - 1 > MAX_FORM_DEPTH:
        return [key]
    return segments


def expand_form_pairs(pairs: list[tuple[str, str]]) -> dict[str, Any]:
    """
    Build a nested structure from (key, value) pairs.

    - "a=1&a=2"          -> {"a": ["1", "2"]}
    - "a[]=1"            -> {"a": ["1"]}
    - "a[b]=1&a[c]=2"    -> {"a": {"b": "1", "c": "2"}}
    - "a[0]=x&a[1]=y"    -> {"a": ["x", "y"]}
    - "a[1]=y&a[0]=x"    -> {"a": ["x", "y"]}
    - "a[0]=x&a[b]=y"    -> {"a": {"0": "x", "b": "y"}}
    - "a[21]=x"          -> {"a": {"21": "x"}}

    Lists built from indices are compacted in index order, so gaps
    ("a[3]=x") do not leave holes.
    """
    result: dict[str, Any] = {}
    for key, value in pairs:
        _assign(result, split_form_key(key), value)
    return {name: _to_lists(child) for name, child in result.items()}


def _array_index(segment: str) -> int | None:
    """Canonical non-negative integer within MAX_FORM_ARRAY_INDEX, else None."""
    if not segment.isascii() or not segment.isdigit() or str(int(segment)) != segment:
        return None
    index = int(segment)
    return index if index <= MAX_FORM_ARRAY_INDEX else None


def _next_index(container: dict[str, Any]) -> str:
    used = [i for i in map(_array_index, container) if i is not None]
    return str(max(used) + 1) if used else "0"


def _assign(container: dict[str, Any], segments: list[str], value: str) -> None:
    name, rest = segments[0], segments[1:]

    if not rest:
        _merge_value(container, name, value)
        return

    existing = container.get(name)

    if rest == [""]:
        if existing is None:
            container[name] = [value]
        elif isinstance(existing, list):
            existing.append(value)
        elif isinstance(existing, dict):
            existing[_next_index(existing)] = value
        else:
            container[name] = [existing, value]
        return

    if isinstance(existing, list):
        # "a[]=x&a[1]=y": keep what the list holds under its indices
        child = {str(i): item for i, item in enumerate(existing)}
    elif isinstance(existing, dict):
        child = existing
    else:
        # A scalar already sits here; nested keys win
        child = {}
    container[name] = child
    _assign(child, rest, value)


def _merge_value(container: dict[str, Any], name: str, value: str) -> None:
    if name not in container:
        container[name] = value
    elif isinstance(container[name], list):
        container[name].append(value)
    else:
        container[name] = [container[name], value]


def _to_lists(node: Any) -> Any:
    """Turn dicts keyed only by array indices into lists, recursively."""
    if isinstance(node, list):
        return [_to_lists(item) for item in node]
    if not isinstance(node, dict):
        return node

    converted = {key: _to_lists(child) for key, child in node.items()}
    indices = [_array_index(key) for key in converted]
    if converted and all(i is not None for i in indices):
        return [converted[key] for _, key in sorted(zip(indices, converted))]
    return converted
