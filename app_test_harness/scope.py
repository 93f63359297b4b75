"""The context handed to each spec function."""

import asyncio
import inspect
import logging
from collections.abc import Sequence
from typing import Literal, Protocol, TypeAlias

from app_test_harness.errors import ScopeClosedError
from app_test_harness.lookup import ElementFinder
from app_test_harness.models.case import CaseBody, TestCase
from app_test_harness.registry import ElementRegistry

log = logging.getLogger(__name__)

ScopeState: TypeAlias = Literal["collecting", "ready"]


class Rerenderable(Protocol):
    """Anything that can reset the UI under test."""

    async def re_render(self) -> None:
        """Request a remount of the UI under test."""


class TestScope:
    """Collects the cases of one spec and exposes helpers to their bodies.

    A scope starts out collecting: the spec function declares cases with
    describe(). Once the spec function returns, the scope is frozen and its
    case list is fixed. Case bodies then use find_component() and the
    interaction and assertion helpers while the runner executes them.
    """

    __test__ = False

    def __init__(
        self,
        component: Rerenderable,
        registry: ElementRegistry,
        finder: ElementFinder,
        wait_time: float,
    ) -> None:
        self.component = component
        self.registry = registry
        self.finder = finder
        self.wait_time = wait_time
        self._cases: list[TestCase] = []
        self._state: ScopeState = "collecting"

    @property
    def state(self) -> ScopeState:
        return self._state

    @property
    def cases(self) -> Sequence[TestCase]:
        return tuple(self._cases)

    def describe(self, description: str, body: CaseBody) -> None:
        """Declare a test case.

        Raises:
            ScopeClosedError: If the scope has already been frozen

        """
        if self._state != "collecting":
            raise ScopeClosedError(
                f"Cannot declare '{description}': cases are already collected"
            )
        self._cases.append(TestCase(description=description, body=body))

    def freeze(self) -> Sequence[TestCase]:
        """Stop collecting cases and return them in declaration order."""
        self._state = "ready"
        return self.cases

    async def find_component(self, identifier: str) -> object:
        """Wait for an element to mount and return its handle."""
        return await self.finder.find(identifier, self.wait_time)

    async def press(self, identifier: str) -> None:
        """Invoke an element's press callback."""
        await self._invoke(identifier, "on_press")

    async def fill_in(self, identifier: str, text: str) -> None:
        """Invoke an element's text-change callback with text."""
        await self._invoke(identifier, "on_change_text", text)

    async def focus(self, identifier: str) -> None:
        """Invoke an element's focus callback."""
        await self._invoke(identifier, "on_focus")

    async def pause(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def exists(self, identifier: str) -> None:
        """Assert that an element mounts within the wait time."""
        await self.find_component(identifier)

    async def not_exists(self, identifier: str) -> None:
        """Assert that an element is not currently mounted."""
        if self.registry.lookup(identifier) is not None:
            raise AssertionError(f"Element '{identifier}' exists")

    async def contains_text(self, identifier: str, text: str) -> None:
        """Assert that an element's text contains the given text."""
        handle = await self.find_component(identifier)
        content = getattr(handle, "text", None)
        if content is None or text not in str(content):
            raise AssertionError(
                f"Expected element '{identifier}' to contain {text!r}, "
                f"got {content!r}"
            )

    async def re_render(self) -> None:
        """Remount the UI under test."""
        await self.component.re_render()

    async def _invoke(self, identifier: str, callback_name: str, *args: object) -> None:
        handle = await self.find_component(identifier)
        callback = getattr(handle, callback_name, None)
        if not callable(callback):
            raise AssertionError(
                f"Element '{identifier}' has no {callback_name} callback"
            )

        log.debug("Invoking %s on %r", callback_name, identifier)
        result = callback(*args)
        if inspect.isawaitable(result):
            await result
