"""Reporters adapting callbacks and duck-typed sinks."""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

from app_test_harness.models.result import Report, TestRunResult
from app_test_harness.reporters.base import Reporter

ReportCallback: TypeAlias = Callable[[Report], Awaitable[None] | None]


@dataclass(frozen=True, kw_only=True)
class CallbackReporter(Reporter):
    """Calls a function with the finished report."""

    callback: ReportCallback

    async def on_complete(self, report: Report) -> None:
        """Pass the report to the callback."""
        result = self.callback(report)
        if inspect.isawaitable(result):
            await result


REPORTER_HOOKS = ("on_start", "on_test_result", "on_complete")


def has_reporter_hooks(sink: object) -> bool:
    """Whether sink exposes any of the reporter hooks."""
    return any(callable(getattr(sink, hook, None)) for hook in REPORTER_HOOKS)


@dataclass(frozen=True, kw_only=True)
class SinkReporter(Reporter):
    """Forwards to an object exposing some of the reporter hooks.

    Hooks the sink does not define are skipped. Sync and async hooks are both
    accepted.
    """

    sink: object

    async def on_start(self) -> None:
        await self._forward("on_start")

    async def on_test_result(self, result: TestRunResult) -> None:
        await self._forward("on_test_result", result)

    async def on_complete(self, report: Report) -> None:
        await self._forward("on_complete", report)

    async def _forward(self, hook: str, *args: object) -> None:
        if not callable(method := getattr(self.sink, hook, None)):
            return
        result = method(*args)
        if inspect.isawaitable(result):
            await result
