"""
Mime-type keyed registries shared by renderers and body parsers.
"""

import logging
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from .exceptions import RegistryFrozenError

# Set up logger for this module
logger = logging.getLogger(__name__)

T = TypeVar("T")


def normalize_media_type(media_type: str) -> str:
    """Strip parameters and case from a media type (``Text/HTML; charset=x`` -> ``text/html``)."""
    return media_type.split(";", 1)[0].strip().lower()


class MimeRegistry(Generic[T]):
    """Mapping from mime-type to a handler.

    Registries are filled at configuration time and then frozen. A frozen
    registry is read-only and can be shared by requests handled concurrently.
    Lookups return ``None`` on a miss rather than raising, so callers check
    before invoking.
    """

    kind = "handler"

    def __init__(self, handlers: Optional[Dict[str, T]] = None):
        self._handlers: Dict[str, T] = {}
        self._frozen = False
        for media_type, handler in (handlers or {}).items():
            self.register(media_type, handler)

    def register(self, media_type: str, handler: T) -> T:
        """Register a handler for a mime-type, replacing any previous one."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {self.kind} for {media_type!r}: registry is frozen"
            )
        key = normalize_media_type(media_type)
        if key in self._handlers:
            logger.debug(f"Replacing {self.kind} for {key}")
        self._handlers[key] = handler
        return handler

    def registers(self, media_type: str) -> Callable[[T], T]:
        """Decorator form of :meth:`register`."""
        def decorator(handler: T) -> T:
            return self.register(media_type, handler)
        return decorator

    def freeze(self) -> "MimeRegistry[T]":
        """Make the registry read-only. Returns the registry for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, media_type: Optional[str]) -> Optional[T]:
        """Look up the handler for a mime-type, or None when there is none."""
        if not media_type:
            return None
        return self._handlers.get(normalize_media_type(media_type))

    def types(self) -> List[str]:
        """Return the registered mime-types in registration order."""
        return list(self._handlers)

    def __contains__(self, media_type: object) -> bool:
        return isinstance(media_type, str) and self.get(media_type) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self):
        state = "frozen" if self._frozen else "open"
        return f"{type(self).__name__}({self.types()!r}, {state})"
