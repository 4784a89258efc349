"""
Content renderers for different media types.
"""

import html
import logging
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from .exceptions import EncodingError, RendererFailure
from .json_format import INDENT, canonicalize, pretty_print
from .registry import MimeRegistry

# Set up logger for this module
logger = logging.getLogger(__name__)


class _RenderFailed:
    """Sentinel returned by renderers that cannot represent their input."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "RENDER_FAILED"


RENDER_FAILED = _RenderFailed()

RenderFn = Callable[[Any], Union[str, _RenderFailed, None]]


class ContentRenderer:
    """Base class for content renderers.

    Renderers are callables taking plain data and returning the body text, or
    ``RENDER_FAILED`` when they cannot represent the data.
    """

    def __init__(self, media_type: str):
        self.media_type = media_type

    def render(self, data: Any) -> Union[str, _RenderFailed]:
        """Render the data as this content type."""
        raise NotImplementedError

    def __call__(self, data: Any) -> Union[str, _RenderFailed]:
        return self.render(data)

    def __repr__(self):
        return f"{type(self).__name__}({self.media_type!r})"


class JSONRenderer(ContentRenderer):
    """JSON content renderer producing indented output."""

    def __init__(self, indent: str = INDENT):
        super().__init__("application/json")
        self.indent = indent

    def render(self, data: Any) -> Union[str, _RenderFailed]:
        """Render data as pretty-printed JSON."""
        try:
            compact = canonicalize(data)
        except EncodingError as e:
            logger.warning(f"JSON renderer cannot encode data: {e}")
            return RENDER_FAILED

        body = pretty_print(compact, self.indent)
        if body is None:
            return RENDER_FAILED
        return body


class HTMLRenderer(ContentRenderer):
    """HTML content renderer."""

    def __init__(self):
        super().__init__("text/html")

    def render(self, data: Any) -> Union[str, _RenderFailed]:
        """Render data as an HTML document."""
        if isinstance(data, dict):
            content = self._dict_to_html(data)
        elif isinstance(data, (list, tuple)):
            content = self._list_to_html(data)
        else:
            content = f"<p>{self._scalar(data)}</p>"

        return f"""<!DOCTYPE html>
<html>
<head>
    <title>API Response</title>
</head>
<body>
    {content}
</body>
</html>"""

    def _scalar(self, value: Any) -> str:
        return html.escape("" if value is None else str(value))

    def _value_to_html(self, value: Any) -> str:
        if isinstance(value, dict):
            return self._dict_to_html(value)
        if isinstance(value, (list, tuple)):
            return self._list_to_html(value)
        return f'<span class="value">{self._scalar(value)}</span>'

    def _dict_to_html(self, data: dict) -> str:
        """Convert dictionary to a definition list."""
        items = [
            f"<dt>{self._scalar(key)}</dt><dd>{self._value_to_html(value)}</dd>"
            for key, value in data.items()
        ]
        return f"<dl>{''.join(items)}</dl>"

    def _list_to_html(self, data: Iterable) -> str:
        """Convert list to an unordered list."""
        items = [f"<li>{self._value_to_html(item)}</li>" for item in data]
        return f"<ul>{''.join(items)}</ul>"


class PlainTextRenderer(ContentRenderer):
    """Plain text content renderer."""

    def __init__(self):
        super().__init__("text/plain")

    def render(self, data: Any) -> Union[str, _RenderFailed]:
        """Render data as plain text."""
        if isinstance(data, str):
            return data
        elif isinstance(data, dict):
            return "\n".join(f"{k}: {v}" for k, v in data.items())
        elif isinstance(data, (list, tuple)):
            return "\n".join(str(item) for item in data)
        elif data is None:
            return ""
        else:
            return str(data)


class RendererRegistry(MimeRegistry[RenderFn]):
    """Registry of renderers keyed by the mime-type they produce."""

    kind = "renderer"

    def add(self, renderer: ContentRenderer) -> ContentRenderer:
        """Register a renderer under its own media type."""
        self.register(renderer.media_type, renderer)
        return renderer


def default_renderers(indent: str = INDENT) -> RendererRegistry:
    """Build an unfrozen registry holding the built-in renderers."""
    registry = RendererRegistry()
    registry.add(JSONRenderer(indent))
    registry.add(PlainTextRenderer())
    registry.add(HTMLRenderer())
    return registry


def render_with(accepted_types: Iterable[str], data: Any, renderers: MimeRegistry) -> Tuple[str, str]:
    """Render plain data with the first accepted type whose renderer succeeds.

    Args:
        accepted_types: Negotiated mime-types, most preferred first
        data: Plain data to render
        renderers: Registry to look renderers up in

    Returns:
        Tuple of (mime-type used, rendered body)

    Raises:
        RendererFailure: If no renderer produced a body
    """
    for media_type in accepted_types:
        renderer: Optional[RenderFn] = renderers.get(media_type)
        if renderer is None:
            logger.warning(f"No renderer registered for negotiated type {media_type}")
            continue

        body = renderer(data)
        if body is RENDER_FAILED or body is None:
            logger.warning(f"Renderer for {media_type} failed, trying next type")
            continue

        logger.debug(f"Rendered response as {media_type}")
        return media_type, body

    logger.error("All negotiated renderers failed")
    raise RendererFailure()
