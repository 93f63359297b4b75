"""Waiting for elements to appear in the registry."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from app_test_harness.errors import ElementNotFoundError
from app_test_harness.registry import ElementRegistry

log = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.05


async def find_element(
    registry: ElementRegistry,
    identifier: str,
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> object:
    """Wait until an element is registered and return its handle.

    Args:
        registry: Registry the host UI tree populates
        identifier: Identifier the element registers under
        timeout: Maximum wait time in seconds
        poll_interval: Seconds between registry lookups

    Returns:
        The registered handle

    Raises:
        ElementNotFoundError: If nothing registers under identifier in time

    """
    loop = asyncio.get_event_loop()
    deadline = loop.time() + timeout

    while True:
        if (handle := registry.lookup(identifier)) is not None:
            return handle

        remaining = deadline - loop.time()
        if remaining <= 0:
            log.debug("Gave up waiting for %r after %ss", identifier, timeout)
            raise ElementNotFoundError(identifier, timeout)

        await asyncio.sleep(min(poll_interval, remaining))


class ElementFinder(ABC):
    """Strategy for awaiting an element to mount."""

    @abstractmethod
    async def find(self, identifier: str, timeout: float) -> object:
        """Return the handle for identifier or raise ElementNotFoundError."""


@dataclass(frozen=True, kw_only=True)
class PollingElementFinder(ElementFinder):
    """Finds elements by polling the registry at a fixed interval."""

    registry: ElementRegistry
    poll_interval: float = DEFAULT_POLL_INTERVAL

    async def find(self, identifier: str, timeout: float) -> object:
        """Poll the registry until identifier is registered."""
        return await find_element(
            self.registry, identifier, timeout, self.poll_interval
        )
