"""
RESTful resource: mediates one request between transport, actions and renderers.

Subclasses declare actions as ``action_<name>`` methods and map HTTP methods
onto them with ``action_map``. By default:

GET
:  ``get``, retrieve the resource

POST
:  ``create``, create a new resource

PUT
:  ``update``, update an existing resource

DELETE
:  ``delete``, delete an existing resource

Example::

    class Notes(RestResource):
        def action_get(self):
            self.response({"notes": []})

        def action_create(self):
            self.response({"created": self.request.body})
"""

import logging
from functools import lru_cache
from typing import Any, ClassVar, FrozenSet, List, Optional, Tuple

from .config import DEFAULT_CONFIG, MediatorConfig
from .content_parsers import ParserRegistry, default_parsers, select_parser
from .content_renderers import RendererRegistry, default_renderers, render_with
from .dispatch import (
    BODY_METHODS,
    DEFAULT_ACTION_MAP,
    INVALID,
    NO_CACHE_METHODS,
    ActionMap,
    effective_method,
    resolve,
)
from .exceptions import (
    MalformedRequestBody,
    MethodNotAllowed,
    NoContentTypeProvided,
    ServerMisconfigured,
    UnsupportedMediaType,
)
from .models import Request, Response
from .negotiation import negotiate
from .normalize import normalize

# Set up logger for this module
logger = logging.getLogger(__name__)

ACTION_PREFIX = "action_"
INVALID_ACTION = "invalid"

_MISSING = object()


@lru_cache(maxsize=None)
def default_registries(indent: str = DEFAULT_CONFIG.indent) -> Tuple[RendererRegistry, ParserRegistry]:
    """Frozen built-in registries, built once per process and indent unit."""
    return default_renderers(indent).freeze(), default_parsers().freeze()


def _collect_handlers(cls) -> FrozenSet[str]:
    return frozenset(
        name[len(ACTION_PREFIX):]
        for name in dir(cls)
        if name.startswith(ACTION_PREFIX) and callable(getattr(cls, name))
    )


class RestResource:
    """Base class for RESTful resources."""

    action_map: ClassVar[ActionMap] = DEFAULT_ACTION_MAP

    # Action names this class has handlers for, collected at class creation
    handlers: ClassVar[FrozenSet[str]] = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.handlers = _collect_handlers(cls)

    def __init__(
        self,
        request: Request,
        response: Optional[Response] = None,
        renderers: Optional[RendererRegistry] = None,
        parsers: Optional[ParserRegistry] = None,
        config: Optional[MediatorConfig] = None,
    ):
        self.request = request
        self._response = response if response is not None else Response()
        self.config = config or DEFAULT_CONFIG

        if renderers is None or parsers is None:
            default_renderer_registry, default_parser_registry = default_registries(self.config.indent)
            renderers = renderers if renderers is not None else default_renderer_registry
            parsers = parsers if parsers is not None else default_parser_registry
        self.renderers = renderers
        self.parsers = parsers

        self.method = effective_method(
            request.method, request.header(self.config.method_override_header)
        )
        self.action: Optional[str] = None
        self.accept_types: List[str] = []

    def before(self) -> None:
        """Preflight checks: pick the action, parse the body, negotiate types."""
        # Output type stays text/plain until a renderer succeeds
        self._response.headers["Content-Type"] = "text/plain"

        self.action = self._resolve_action()
        if self.action == INVALID_ACTION:
            return

        if self.method in BODY_METHODS:
            self.request.body = self._parse_body()

        self.accept_types = negotiate(
            self.request.accept_types(), self.renderers, self.config.content_type, self.method
        )
        logger.debug(f"Negotiated types for {self.method}: {self.accept_types}")

    def after(self) -> None:
        """Prevent caching of responses to PUT, POST and DELETE."""
        if self.method in NO_CACHE_METHODS:
            self._response.headers["Cache-Control"] = self.config.no_cache_header

    def action_invalid(self) -> None:
        """Answer "Method Not Allowed" with the list of allowed methods."""
        self._response.headers["Allow"] = ", ".join(self.action_map.keys())
        raise MethodNotAllowed()

    def response(self, data: Any = _MISSING):
        """Get or set the response body.

        Called without arguments, returns the current body. Called with data,
        renders it with the first negotiated type that succeeds and stores the
        result as the body; returns the resource for chaining.
        """
        if data is _MISSING:
            return self._response.body

        media_type, body = render_with(self.accept_types, normalize(data), self.renderers)
        self._response.body = body
        self._response.headers["Content-Type"] = media_type
        return self

    def execute(self) -> Response:
        """Run the request lifecycle and return the response.

        An action may either call ``response()`` itself or return the data to
        send; a returned value other than None is passed to ``response()``.
        """
        self.before()

        handler = getattr(self, ACTION_PREFIX + self.action)
        result = handler()
        if result is not None:
            self.response(result)

        self.after()
        return self._response

    def _resolve_action(self) -> str:
        action = resolve(self.method, None, self.action_map)
        if action is INVALID:
            logger.debug(f"Method {self.method} not in action map {list(self.action_map)}")
            return INVALID_ACTION

        if action not in self.handlers:
            logger.error(f"{type(self).__name__} maps {self.method} to {action!r} but has no {ACTION_PREFIX}{action}")
            raise ServerMisconfigured()

        logger.debug(f"Dispatching {self.method} to {type(self).__name__}.{ACTION_PREFIX}{action}")
        return action

    def _parse_body(self) -> Any:
        content_type = self.request.get_content_type()
        if not content_type:
            raise NoContentTypeProvided()

        parser = select_parser(content_type, self.parsers)
        if parser is None:
            raise UnsupportedMediaType()

        body = self.request.body
        if isinstance(body, (bytes, str)) and len(body) > 0:
            logger.debug(f"Parsing {len(body)} byte body as {content_type}")
            parsed = parser(body)
        elif body is not None and not isinstance(body, (bytes, str)):
            # Already decoded by the surrounding framework
            parsed = body
        else:
            parsed = self.request.form

        if not parsed:
            raise MalformedRequestBody()
        return parsed


RestResource.handlers = _collect_handlers(RestResource)
