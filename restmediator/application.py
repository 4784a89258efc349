"""
Transport boundary: runs resources and turns raised errors into responses.
"""

import logging
from http import HTTPStatus
from typing import Optional, Type

from .config import DEFAULT_CONFIG, MediatorConfig
from .content_parsers import ParserRegistry
from .content_renderers import RendererRegistry
from .error_models import ErrorResponse
from .exceptions import HTTPError, UnknownAggregateError
from .models import Request, Response
from .resource import RestResource, default_registries

# Set up logger for this module
logger = logging.getLogger(__name__)


class RestApplication:
    """Serves one resource class.

    Registries are frozen on construction and shared by every request; each
    request gets its own resource instance and response.
    """

    def __init__(
        self,
        resource_class: Type[RestResource],
        renderers: Optional[RendererRegistry] = None,
        parsers: Optional[ParserRegistry] = None,
        config: Optional[MediatorConfig] = None,
    ):
        self.resource_class = resource_class
        self.config = config or DEFAULT_CONFIG

        default_renderer_registry, default_parser_registry = default_registries(self.config.indent)
        self.renderers = (renderers if renderers is not None else default_renderer_registry).freeze()
        self.parsers = (parsers if parsers is not None else default_parser_registry).freeze()

    def execute(self, request: Request) -> Response:
        """Handle a request and always return a response.

        ``HTTPError`` becomes a response with the error's status. Headers the
        resource set before failing (such as ``Allow``) are kept. Any other
        exception becomes a 500, except ``UnknownAggregateError`` which marks a
        caller bug and propagates.
        """
        response = Response()
        resource = self.resource_class(
            request,
            response,
            renderers=self.renderers,
            parsers=self.parsers,
            config=self.config,
        )

        try:
            return resource.execute()
        except HTTPError as e:
            return self._error_response(request, response, e)
        except UnknownAggregateError:
            raise
        except Exception:
            logger.exception(f"Unhandled error in {self.resource_class.__name__} for {request.method_name} {request.path}")
            return self._error_response(request, response, HTTPError(status_code=HTTPStatus.INTERNAL_SERVER_ERROR))

    def _error_response(self, request: Request, response: Response, error: HTTPError) -> Response:
        if error.is_server_error:
            logger.error(f"{request.method_name} {request.path} failed with {int(error.status_code)}: {error.message}")
        else:
            logger.warning(f"{request.method_name} {request.path} rejected with {int(error.status_code)}: {error.message}")

        headers = response.headers.copy()
        headers["Content-Type"] = "application/json"
        return Response(
            status_code=error.status_code,
            body=ErrorResponse.from_http_error(error).model_dump_json(),
            headers=headers,
        )
