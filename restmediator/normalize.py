"""
Conversion of response data into plain data.

Renderers only understand nested dicts, lists and scalars. Anything an action
hands to ``response()`` must either already be plain data or be one of a small
closed set of aggregate shapes listed in :func:`normalize`.
"""

import logging
from typing import Any, Dict, Iterable, Protocol, runtime_checkable

from pydantic import BaseModel

from .exceptions import UnknownAggregateError

# Set up logger for this module
logger = logging.getLogger(__name__)

PLAIN_SCALARS = (str, int, float, bool, type(None))


@runtime_checkable
class Normalizable(Protocol):
    """Anything that knows how to turn itself into plain data."""

    def as_plain(self) -> Any:
        ...


@runtime_checkable
class Entity(Protocol):
    """A single ORM-loaded record."""

    def loaded(self) -> bool:
        ...

    def as_dict(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class ResultSet(Protocol):
    """A tabular query result whose rows are entities."""

    def rows(self) -> Iterable[Any]:
        ...


def normalize(data: Any) -> Any:
    """Turn response data into plain data.

    Known shapes, checked in this order:

    - dicts, lists, tuples and JSON scalars pass through unchanged
    - ``Normalizable`` objects are converted with ``as_plain()``
    - pydantic models are dumped with ``model_dump()``
    - ``Entity`` records become ``as_dict()`` when loaded, ``{}`` otherwise
    - ``ResultSet`` results become a list of their normalized rows

    Raises:
        UnknownAggregateError: For any other shape
    """
    if isinstance(data, (dict, list, tuple) + PLAIN_SCALARS):
        return data

    if isinstance(data, Normalizable):
        return data.as_plain()

    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")

    if isinstance(data, Entity):
        if not data.loaded():
            logger.debug(f"Normalizing unloaded {type(data).__name__} to an empty object")
            return {}
        return data.as_dict()

    if isinstance(data, ResultSet):
        return [normalize(row) for row in data.rows()]

    raise UnknownAggregateError(
        f"Cannot convert {type(data).__module__}.{type(data).__qualname__} to plain data"
    )
