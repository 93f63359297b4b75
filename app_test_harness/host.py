"""Interfaces the harness uses to reach the host application."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

log = logging.getLogger(__name__)


class Host(Protocol):
    """The host UI tree under test."""

    async def request_rerender(self) -> None:
        """Ask the host to remount the UI subtree under test.

        Returns once the remount has been requested, not necessarily completed.
        """


class KeyValueStore(Protocol):
    """The host's key-value persistence mechanism."""

    async def get_all_keys(self) -> Sequence[str]:
        """Return every stored key."""

    async def multi_remove(self, keys: Sequence[str]) -> None:
        """Remove the given keys."""


async def clear_persistent_store(store: KeyValueStore) -> None:
    """Remove every key from the store, logging instead of raising on failure."""
    try:
        keys = await store.get_all_keys()
        await store.multi_remove(keys)
    except Exception as e:
        log.warning("Failed to clear persistent store: %s", e, exc_info=e)
        return
    log.debug("Cleared %d key(s) from persistent store", len(keys))


@dataclass(kw_only=True)
class InMemoryStore:
    """Dict-backed key-value store."""

    data: dict[str, str] = field(default_factory=dict)

    async def get_item(self, key: str) -> str | None:
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.data[key] = value

    async def get_all_keys(self) -> Sequence[str]:
        return list(self.data)

    async def multi_remove(self, keys: Sequence[str]) -> None:
        for key in keys:
            self.data.pop(key, None)
