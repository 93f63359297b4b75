"""Models for test cases declared by spec functions."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeAlias

CaseBody: TypeAlias = Callable[[], Awaitable[None] | None]


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A single named unit of test logic declared inside a scope."""

    __test__ = False

    description: str
    body: CaseBody = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class ScheduledCase:
    """A test case tagged with its position in the run."""

    suite_index: int
    case_index: int
    case: TestCase

    @property
    def description(self) -> str:
        """Description of the underlying case."""
        return self.case.description
