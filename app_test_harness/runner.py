"""Sequential execution of test cases."""

import asyncio
import inspect
import logging
import traceback
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from app_test_harness.errors import HarnessFault, TimedOutError
from app_test_harness.models.case import CaseBody, ScheduledCase
from app_test_harness.models.result import CaseStatus, Report, TestRunResult
from app_test_harness.reporters.base import Reporter
from app_test_harness.scope import TestScope

log = logging.getLogger(__name__)


class CaseHost(Protocol):
    """What the runner needs from the harness between cases."""

    async def re_render(self) -> None:
        """Remount the UI under test."""

    async def clear_async(self) -> None:
        """Clear persisted state, if configured."""


def matches_filter(description: str, only: Sequence[str] | None) -> bool:
    """Check whether a case description is selected by the only filter."""
    if only is None:
        return True
    return any(name in description for name in only)


async def _run_body(body: CaseBody) -> None:
    result = body()
    if inspect.isawaitable(result):
        await result


@dataclass(kw_only=True)
class TestRunner:
    """Runs every case of every scope strictly one after another.

    Before each case the UI is remounted and persisted state is cleared, so no
    case observes state left behind by the previous one. Each case body is
    raced against a timeout. A case that times out is reported and abandoned,
    but not cancelled: its body may keep running in the background and
    interfere with the cases that follow.
    """

    __test__ = False

    component: CaseHost
    scopes: Sequence[TestScope]
    reporter: Reporter
    case_timeout: float
    start_delay: float = 0.0
    only: Sequence[str] | None = None
    _lingering: set[asyncio.Task[None]] = field(default_factory=set, repr=False)

    async def run(self) -> Report:
        """Run all cases and deliver the report.

        Returns:
            The report handed to the reporter

        Raises:
            HarnessFault: If the host cannot be reached between cases. A
                partial report is delivered before raising.

        """
        loop = asyncio.get_event_loop()
        started = loop.time()
        results: list[TestRunResult] = []

        await self.reporter.on_start()

        if self.start_delay > 0:
            log.info("Waiting %ss before starting tests", self.start_delay)
            await asyncio.sleep(self.start_delay)

        cases = self._schedule()
        log.info("Running %d test case(s)...", len(cases))

        try:
            for scheduled in cases:
                if matches_filter(scheduled.description, self.only):
                    await self._reset()
                    result = await self._run_case(scheduled)
                else:
                    result = TestRunResult(
                        description=scheduled.description,
                        suite_index=scheduled.suite_index,
                        case_index=scheduled.case_index,
                        status="skipped",
                        duration=0.0,
                    )
                results.append(result)
                await self._emit(result)
        except HarnessFault:
            log.error("Test run aborted after %d case(s)", len(results))
            partial = Report.from_results(
                results, loop.time() - started, complete=False
            )
            try:
                await self.reporter.on_complete(partial)
            except Exception as e:
                log.error("Failed to deliver partial report: %s", e, exc_info=e)
            raise

        report = Report.from_results(results, loop.time() - started)
        log.info(
            "Test run completed: %d passed, %d failed, %d timed out, %d skipped",
            report.passed_count,
            report.failed_count,
            report.timed_out_count,
            report.skipped_count,
        )
        try:
            await self.reporter.on_complete(report)
        except Exception as e:
            log.error("Reporter failed to handle report: %s", e, exc_info=e)
        return report

    def _schedule(self) -> Sequence[ScheduledCase]:
        """Flatten the scopes' cases into one ordered sequence."""
        return [
            ScheduledCase(suite_index=suite_index, case_index=case_index, case=case)
            for suite_index, scope in enumerate(self.scopes)
            for case_index, case in enumerate(scope.freeze())
        ]

    async def _reset(self) -> None:
        try:
            await self.component.re_render()
        except Exception as e:
            raise HarnessFault(f"Could not re-render host: {e}") from e
        await self.component.clear_async()

    async def _run_case(self, scheduled: ScheduledCase) -> TestRunResult:
        """Run one case body against the timeout and record its outcome."""
        loop = asyncio.get_event_loop()
        started = loop.time()
        log.debug("Running %r", scheduled.description)

        task = asyncio.create_task(_run_body(scheduled.case.body))
        done, _ = await asyncio.wait({task}, timeout=self.case_timeout)
        duration = loop.time() - started

        if not done:
            self._abandon(task, scheduled.description)
            error = TimedOutError(scheduled.description, self.case_timeout)
            return self._result(scheduled, "timed_out", duration, error)

        if task.cancelled():
            error = asyncio.CancelledError("Test case body was cancelled")
            return self._result(scheduled, "failed", duration, error)
        if (exc := task.exception()) is None:
            return self._result(scheduled, "passed", duration)
        if isinstance(exc, TimedOutError):
            return self._result(scheduled, "timed_out", duration, exc)
        if isinstance(exc, Exception):
            return self._result(scheduled, "failed", duration, exc)
        raise exc

    def _abandon(self, task: asyncio.Task[None], description: str) -> None:
        log.warning(
            "Test case %r timed out after %ss and is still running",
            description,
            self.case_timeout,
        )
        self._lingering.add(task)
        task.add_done_callback(self._forget)

    def _forget(self, task: asyncio.Task[None]) -> None:
        self._lingering.discard(task)
        if not task.cancelled() and (exc := task.exception()) is not None:
            log.debug("Abandoned test case finished with %r", exc)

    @staticmethod
    def _result(
        scheduled: ScheduledCase,
        status: CaseStatus,
        duration: float,
        error: BaseException | None = None,
    ) -> TestRunResult:
        return TestRunResult(
            description=scheduled.description,
            suite_index=scheduled.suite_index,
            case_index=scheduled.case_index,
            status=status,
            duration=duration,
            error=str(error) if error is not None else None,
            error_type=type(error).__name__ if error is not None else None,
            traceback=(
                "".join(traceback.format_exception(error))
                if error is not None
                else None
            ),
        )

    async def _emit(self, result: TestRunResult) -> None:
        try:
            await self.reporter.on_test_result(result)
        except Exception as e:
            log.error("Reporter failed to handle result: %s", e, exc_info=e)
