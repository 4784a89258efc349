"""
Core data models for the mediation layer.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

# Set up logger for this module
logger = logging.getLogger(__name__)


class Headers:
    """
    Case-insensitive header container.

    HTTP header names are case-insensitive per RFC 7230. Lookups ignore case
    while iteration keeps the casing the header was last set with::

        headers = Headers({"Content-Type": "application/json"})
        headers.get("content-type")   # 'application/json'
        headers["ALLOW"] = "GET, PUT"
        list(headers)                 # ['Content-Type', 'ALLOW']
    """

    def __init__(self, data=None):
        # Internal storage: Dict[lowercase_name, Tuple[original_name, value]]
        self._headers: Dict[str, Tuple[str, str]] = {}

        if data is not None:
            if isinstance(data, Headers):
                self._headers = dict(data._headers)
            elif isinstance(data, dict):
                for key, value in data.items():
                    self.set(key, value)
            elif isinstance(data, (list, tuple)):
                for key, value in data:
                    self.set(key, value)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a header value, or ``default`` when it is absent."""
        if not isinstance(name, str):
            return default
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else default

    def set(self, name: str, value: str) -> None:
        """Set a header, replacing any existing value regardless of case."""
        self._headers[name.lower()] = (name, value)

    def __setitem__(self, name: str, value: str) -> None:
        self.set(name, value)

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        for original_name, _ in self._headers.values():
            yield original_name

    def __len__(self) -> int:
        return len(self._headers)

    def items(self) -> List[Tuple[str, str]]:
        """Return (name, value) pairs."""
        return list(self._headers.values())

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain dict keyed by original header names."""
        return dict(self._headers.values())

    def copy(self) -> "Headers":
        return Headers(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            other = Headers(other)
        if not isinstance(other, Headers):
            return NotImplemented
        return {k: v[1] for k, v in self._headers.items()} == {k: v[1] for k, v in other._headers.items()}

    def __repr__(self):
        return f"Headers({self.items()!r})"


class HTTPMethod(Enum):
    """Enumeration of supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def parse_accept_header(accept_header: Optional[str]) -> "OrderedDict[str, float]":
    """Parse an Accept header into an ordered mapping of mime-type to quality.

    Entries are ordered by descending quality; entries sharing a quality keep
    the order they were listed in. Media-type parameters other than ``q`` are
    dropped, and types with ``q=0`` are excluded since they are explicitly not
    acceptable.

    Args:
        accept_header: The raw Accept header value

    Returns:
        OrderedDict mapping mime-type to quality, most preferred first
    """
    if not accept_header or not accept_header.strip():
        return OrderedDict()

    entries = []
    for position, part in enumerate(accept_header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        media_type = pieces[0].lower()
        if not media_type:
            continue

        quality = 1.0
        for param in pieces[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    logger.debug(f"Ignoring malformed quality value {value!r} for {media_type}")
                    quality = 1.0

        if quality <= 0:
            continue
        entries.append((-quality, position, media_type, quality))

    accepted: "OrderedDict[str, float]" = OrderedDict()
    for _, _, media_type, quality in sorted(entries):
        # First (highest quality) occurrence of a repeated type wins
        accepted.setdefault(media_type, quality)
    return accepted


@dataclass
class Request:
    """Represents an inbound HTTP request.

    The body is the raw payload as received (bytes or text). Once the body has
    been validated and parsed, the parsed structure replaces it so that action
    handlers see plain data. ``form`` holds form fields the surrounding
    framework already decoded, used when the raw body is empty.
    """

    method: Union[HTTPMethod, str]
    headers: Union[Dict[str, str], Headers] = field(default_factory=dict)
    body: Any = None
    form: Optional[Dict[str, Any]] = None
    path: str = "/"

    def __post_init__(self):
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)

    @property
    def method_name(self) -> str:
        """The transport method as an uppercase string."""
        if isinstance(self.method, HTTPMethod):
            return self.method.value
        return str(self.method).upper()

    def header(self, name: str) -> Optional[str]:
        """Get a header value, or None when absent."""
        return self.headers.get(name)

    def get_content_type(self) -> Optional[str]:
        """Get the Content-Type header."""
        return self.headers.get("Content-Type")

    def get_accept_header(self) -> str:
        """Get the raw Accept header, empty when not present."""
        return self.headers.get("Accept", "")

    def accept_types(self) -> "OrderedDict[str, float]":
        """Get accepted mime-types mapped to quality, most preferred first."""
        return parse_accept_header(self.get_accept_header())


@dataclass
class Response:
    """Represents an outgoing HTTP response."""

    status_code: int = HTTPStatus.OK
    body: Optional[str] = None
    headers: Union[Dict[str, str], Headers] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")
