"""
Content negotiation between the client's Accept header and available renderers.
"""

import logging
from typing import List, Mapping, Union

from .exceptions import NotAcceptable
from .models import HTTPMethod
from .registry import MimeRegistry

# Set up logger for this module
logger = logging.getLogger(__name__)

WILDCARD = "*/*"


def negotiate(
    accept_types: Mapping[str, float],
    renderers: MimeRegistry,
    default_type: str,
    method: Union[HTTPMethod, str] = HTTPMethod.GET,
) -> List[str]:
    """Compute the mime-types the response may be rendered as.

    Args:
        accept_types: Accepted mime-types mapped to quality, most preferred first
        renderers: Registry of available renderers
        default_type: Type used when the client accepts anything
        method: Effective request method

    Returns:
        Renderable mime-types, most preferred first. May be empty for
        methods other than GET.

    Raises:
        NotAcceptable: If a GET request accepts none of the renderable types
    """
    if not accept_types or (len(accept_types) == 1 and WILDCARD in accept_types):
        return [default_type]

    negotiated = [media_type for media_type in accept_types if renderers.get(media_type) is not None]

    method_name = method.value if isinstance(method, HTTPMethod) else str(method).upper()
    if method_name == HTTPMethod.GET.value and not negotiated:
        logger.debug(f"No renderer for any of {list(accept_types)}")
        raise NotAcceptable(
            "This service delivers following types: :types.",
            {":types": ", ".join(renderers.types())},
        )

    return negotiated
