"""
Resolution of HTTP methods to resource actions.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from .models import HTTPMethod


class _Invalid:
    """Marker returned when a method has no action."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "INVALID"


INVALID = _Invalid()

# Method name -> action name
ActionMap = Mapping[str, str]

DEFAULT_ACTION_MAP: ActionMap = MappingProxyType({
    HTTPMethod.GET.value: "get",
    HTTPMethod.PUT.value: "update",
    HTTPMethod.POST.value: "create",
    HTTPMethod.DELETE.value: "delete",
})

BODY_METHODS = frozenset({HTTPMethod.POST.value, HTTPMethod.PUT.value})
NO_CACHE_METHODS = frozenset({HTTPMethod.PUT.value, HTTPMethod.POST.value, HTTPMethod.DELETE.value})


def effective_method(method: Union[HTTPMethod, str], override: Optional[str] = None) -> str:
    """The uppercase method a request should be treated as.

    A non-empty override header wins over the transport method.
    """
    if override and override.strip():
        return override.strip().upper()
    if isinstance(method, HTTPMethod):
        return method.value
    return str(method).upper()


def resolve(method: Union[HTTPMethod, str], override: Optional[str], action_map: ActionMap) -> Union[str, _Invalid]:
    """Map a request method to the action name it invokes.

    Returns:
        The mapped action name, or ``INVALID`` when the effective method
        is not in the action map.
    """
    return action_map.get(effective_method(method, override), INVALID)
