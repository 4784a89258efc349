"""
Custom exceptions for the mediation layer.

Every client or configuration failure detected while mediating a request is
an ``HTTPError`` carrying the status code the transport layer should answer
with. They are raised where the problem is found and are not caught anywhere
inside the core.
"""
from http import HTTPStatus
from typing import Any, Dict, Optional, Type


class HTTPError(Exception):
    """Base exception for errors that map onto an HTTP status."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        if status_code is not None:
            self.status_code = status_code
        if message is None:
            try:
                message = HTTPStatus(self.status_code).phrase
            except ValueError:
                message = "HTTP Error"
        if params:
            for placeholder, value in params.items():
                message = message.replace(placeholder, str(value))
        self.message = message
        super().__init__(self.message)

    @property
    def is_server_error(self) -> bool:
        """True for 5xx errors, which indicate a programming or config defect."""
        return self.status_code >= 500


class MethodNotAllowed(HTTPError):
    """Raised when the effective method has no entry in the action map."""

    status_code = HTTPStatus.METHOD_NOT_ALLOWED


class ServerMisconfigured(HTTPError):
    """Raised when an action is mapped but the resource has no handler for it."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = "METHOD_MISCONFIGURED", params=None):
        super().__init__(message, params)


class NoContentTypeProvided(HTTPError):
    """Raised when a POST or PUT request does not declare its Content-Type."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: Optional[str] = "NO_CONTENT_TYPE_PROVIDED", params=None):
        super().__init__(message, params)


class UnsupportedMediaType(HTTPError):
    """Raised when no parser is registered for the request Content-Type."""

    status_code = HTTPStatus.UNSUPPORTED_MEDIA_TYPE


class MalformedRequestBody(HTTPError):
    """Raised when the body parser yields nothing usable."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: Optional[str] = "MALFORMED_REQUEST_BODY", params=None):
        super().__init__(message, params)


class NotAcceptable(HTTPError):
    """Raised when a GET request accepts none of the renderable types."""

    status_code = HTTPStatus.NOT_ACCEPTABLE


class RendererFailure(HTTPError):
    """Raised when every negotiated renderer failed to produce a body."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = "RESPONSE_RENDERER_FAILURE", params=None):
        super().__init__(message, params)


class EncodingError(ValueError):
    """Raised when data cannot be encoded to, or decoded from, JSON text."""

    def __init__(self, message="Failed to encode JSON", original_exception=None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)


class UnknownAggregateError(TypeError):
    """Raised when response data has a shape that cannot be made plain.

    An unknown shape is a caller bug, not a client error, so this is not an
    ``HTTPError``.
    """


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry after it was frozen."""


_ERRORS_BY_STATUS: Dict[int, Type[HTTPError]] = {
    HTTPStatus.METHOD_NOT_ALLOWED: MethodNotAllowed,
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: UnsupportedMediaType,
    HTTPStatus.NOT_ACCEPTABLE: NotAcceptable,
}


def http_error(status_code: int, message: Optional[str] = None, params: Optional[Dict[str, Any]] = None) -> HTTPError:
    """Build an HTTPError for a status code.

    ``message`` may carry ``:name`` placeholders which are substituted from
    ``params``, e.g. ``http_error(406, "Types: :types", {":types": "a, b"})``.
    Status codes without a dedicated class get a generic ``HTTPError``.
    """
    error_class = _ERRORS_BY_STATUS.get(status_code)
    if error_class is not None:
        return error_class(message, params)

    return HTTPError(message, params, status_code=status_code)
