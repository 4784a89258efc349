"""
Request body parsers keyed by Content-Type.

Parsers take the raw body and return plain data. They never raise for bad
input: a falsy result tells the caller the body was malformed.
"""

import json
import logging
from typing import Any, Callable, Optional, Union
from urllib.parse import parse_qs

from .registry import MimeRegistry

# Set up logger for this module
logger = logging.getLogger(__name__)

RawBody = Union[bytes, str]
ParseFn = Callable[[RawBody], Any]


def _decode(body: RawBody, encoding: str = "utf-8") -> Optional[str]:
    if isinstance(body, str):
        return body
    try:
        return body.decode(encoding)
    except UnicodeDecodeError:
        return None


def parse_json(body: RawBody) -> Any:
    """Parse a JSON body, returning None when it is not valid JSON."""
    text = _decode(body)
    if text is None:
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug(f"Invalid JSON body: {e}")
        return None


def parse_form(body: RawBody) -> Any:
    """Parse a urlencoded form body.

    Fields given once become plain strings, repeated fields keep every value
    as a list.
    """
    text = _decode(body)
    if text is None:
        return None
    parsed = parse_qs(text, keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


def parse_text(body: RawBody) -> Any:
    """Return the body as text."""
    return _decode(body)


class ParserRegistry(MimeRegistry[ParseFn]):
    """Registry of body parsers keyed by the Content-Type they read."""

    kind = "parser"


def default_parsers() -> ParserRegistry:
    """Build an unfrozen registry holding the built-in parsers."""
    registry = ParserRegistry()
    registry.register("application/json", parse_json)
    registry.register("application/x-www-form-urlencoded", parse_form)
    registry.register("text/plain", parse_text)
    return registry


def select_parser(content_type: Optional[str], parsers: MimeRegistry) -> Optional[ParseFn]:
    """Find the parser for a Content-Type header value, or None."""
    return parsers.get(content_type)
