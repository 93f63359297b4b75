"""Base class for report sinks."""

from app_test_harness.models.result import Report, TestRunResult


class Reporter:
    """Consumer of test results.

    The runner calls on_start() before the first case, on_test_result() after
    every case and on_complete() exactly once at the end. Every hook defaults
    to doing nothing, so a sink only overrides the ones it needs. Reporters
    must not mutate the report they are handed.
    """

    async def on_start(self) -> None:
        """Handle the start of a run."""

    async def on_test_result(self, result: TestRunResult) -> None:
        """Handle the result of a single case."""

    async def on_complete(self, report: Report) -> None:
        """Handle the finished report."""
