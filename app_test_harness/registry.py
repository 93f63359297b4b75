"""Registry of discoverable UI elements, keyed by identifier."""

import logging
import weakref
from collections.abc import Iterator
from contextlib import contextmanager

from app_test_harness.errors import DuplicateIdentifierError

log = logging.getLogger(__name__)


class ElementRegistry:
    """Index of currently mounted elements.

    The host UI tree registers elements as they mount and unregisters them as
    they unmount. Handles are held through weak references, so the registry
    never keeps an unmounted element alive.

    By default a second registration of an identifier replaces the first one
    and logs a warning, since remounts are expected. A strict registry raises
    DuplicateIdentifierError instead.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._elements: weakref.WeakValueDictionary[str, object] = (
            weakref.WeakValueDictionary()
        )

    def register(self, identifier: str, handle: object) -> None:
        """Bind an identifier to a mounted element."""
        current = self._elements.get(identifier)
        if current is handle:
            return

        if current is not None:
            if self.strict:
                raise DuplicateIdentifierError(identifier)
            log.warning(
                "Identifier %r re-registered, replacing previous element", identifier
            )

        self._elements[identifier] = handle

    def unregister(self, identifier: str, handle: object | None = None) -> None:
        """Remove an identifier.

        If handle is given, the binding is only removed while it still points
        at that handle, so a late unmount cannot drop a remounted element.
        """
        current = self._elements.get(identifier)
        if current is None:
            return
        if handle is not None and current is not handle:
            log.debug("Ignoring stale unregister for %r", identifier)
            return
        del self._elements[identifier]

    def lookup(self, identifier: str) -> object | None:
        """Return the element bound to identifier, if it is mounted."""
        return self._elements.get(identifier)

    def identifiers(self) -> list[str]:
        """Return the identifiers of all mounted elements."""
        return sorted(self._elements.keys())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._elements

    def __len__(self) -> int:
        return len(self._elements)


@contextmanager
def registered(
    registry: ElementRegistry, identifier: str, handle: object
) -> Iterator[object]:
    """Keep an element registered for the duration of a mount."""
    registry.register(identifier, handle)
    try:
        yield handle
    finally:
        registry.unregister(identifier, handle)
