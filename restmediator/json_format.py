"""
JSON encoding and pretty-printing.

Data is first encoded to compact JSON, then laid out by a single pass over
the compact text. The pass only tracks the indent depth and whether it is
inside a string literal, so it never needs to rebuild the document.
"""

import json
import logging
from typing import Any, Optional

from .exceptions import EncodingError

# Set up logger for this module
logger = logging.getLogger(__name__)

INDENT = "\t"

_OPENERS = "{["
_CLOSERS = "}]"


def canonicalize(data: Any) -> str:
    """Encode plain data to compact JSON text.

    Raises:
        EncodingError: If the data is cyclic, holds a non-finite float or a
            value JSON cannot represent.
    """
    try:
        return json.dumps(data, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingError(f"Cannot encode data as JSON: {e}", original_exception=e) from e


def format_json(compact: str, indent: str = INDENT) -> str:
    """Lay out JSON text with one value per line and ``indent`` per level.

    The text is decoded and re-encoded compactly first, so any valid JSON is
    accepted regardless of its existing whitespace.

    Raises:
        EncodingError: If ``compact`` is not valid JSON.
    """
    try:
        decoded = json.loads(compact)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot decode JSON text: {e}", original_exception=e) from e

    text = canonicalize(decoded)

    output = []
    indent_level = 0
    in_string = False

    for position, char in enumerate(text):
        if char == '"':
            # Only the single preceding character is consulted
            if position == 0 or text[position - 1] != "\\":
                in_string = not in_string
            output.append(char)
        elif in_string:
            output.append(char)
        elif char in _OPENERS:
            output.append(char + "\n" + indent * (indent_level + 1))
            indent_level += 1
        elif char in _CLOSERS:
            indent_level -= 1
            output.append("\n" + indent * indent_level + char)
        elif char == ",":
            output.append(",\n" + indent * indent_level)
        elif char == ":":
            output.append(": ")
        else:
            output.append(char)

    return "".join(output)


def pretty_print(compact: str, indent: str = INDENT) -> Optional[str]:
    """Pretty-print JSON text, returning None when it cannot be decoded."""
    try:
        return format_json(compact, indent)
    except EncodingError as e:
        logger.debug(f"Pretty-printing failed: {e}")
        return None
