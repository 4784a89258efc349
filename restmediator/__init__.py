"""
Request dispatch and content mediation for RESTful web-service endpoints.

A resource maps HTTP methods (with ``X-HTTP-Method-Override`` support) onto
actions, validates request bodies against their declared Content-Type,
negotiates a response type against the Accept header and renders plain data
through a mime-type keyed renderer registry.
"""

from http import HTTPStatus

from .application import RestApplication
from .config import MediatorConfig
from .content_parsers import ParserRegistry, default_parsers
from .content_renderers import (
    RENDER_FAILED,
    ContentRenderer,
    HTMLRenderer,
    JSONRenderer,
    PlainTextRenderer,
    RendererRegistry,
    default_renderers,
)
from .dispatch import INVALID, resolve
from .error_models import ErrorResponse
from .exceptions import (
    EncodingError,
    HTTPError,
    MalformedRequestBody,
    MethodNotAllowed,
    NoContentTypeProvided,
    NotAcceptable,
    RendererFailure,
    ServerMisconfigured,
    UnknownAggregateError,
    UnsupportedMediaType,
    http_error,
)
from .json_format import format_json, pretty_print
from .models import Headers, HTTPMethod, Request, Response
from .negotiation import negotiate
from .normalize import Normalizable, normalize
from .resource import RestResource

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "RestApplication",
    "RestResource",
    "MediatorConfig",
    "Request",
    "Response",
    "Headers",
    "HTTPMethod",
    "HTTPStatus",
    "ContentRenderer",
    "JSONRenderer",
    "HTMLRenderer",
    "PlainTextRenderer",
    "RendererRegistry",
    "ParserRegistry",
    "RENDER_FAILED",
    "default_renderers",
    "default_parsers",
    "INVALID",
    "resolve",
    "negotiate",
    "normalize",
    "Normalizable",
    "format_json",
    "pretty_print",
    "ErrorResponse",
    "HTTPError",
    "MethodNotAllowed",
    "ServerMisconfigured",
    "NoContentTypeProvided",
    "UnsupportedMediaType",
    "MalformedRequestBody",
    "NotAcceptable",
    "RendererFailure",
    "EncodingError",
    "UnknownAggregateError",
    "http_error",
]
