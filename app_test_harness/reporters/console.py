"""Reporter that logs results as they arrive."""

import logging
from dataclasses import dataclass, field

from app_test_harness.models.result import Report, TestRunResult
from app_test_harness.reporters.base import Reporter

STATUS_SYMBOLS = {
    "passed": "✓",
    "failed": "✗",
    "timed_out": "⏱",
    "skipped": "-",
}


def format_result(result: TestRunResult) -> str:
    """Format a result as a single summary line."""
    symbol = STATUS_SYMBOLS.get(result.status, "?")
    return f"{symbol} {result.description}: {result.status} ({result.duration:.2f}s)"


def log_results_summary(log: logging.Logger, report: Report) -> None:
    """Log a formatted summary of a report."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in report.results:
        log.info("%s", format_result(result))
        if result.error:
            log.info("  %s: %s", result.error_type or "Error", result.error)

    log.info(
        "%d total, %d passed, %d failed, %d timed out, %d skipped (%.2fs)",
        report.total_count,
        report.passed_count,
        report.failed_count,
        report.timed_out_count,
        report.skipped_count,
        report.duration,
    )
    if not report.complete:
        log.warning("Run aborted, report is partial")


@dataclass(frozen=True, kw_only=True)
class ConsoleReporter(Reporter):
    """Logs each result immediately and a summary at the end."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("app_test_harness"), repr=False
    )

    async def on_start(self) -> None:
        self.logger.info("Starting test run")

    async def on_test_result(self, result: TestRunResult) -> None:
        self.logger.info("%s", format_result(result))

    async def on_complete(self, report: Report) -> None:
        log_results_summary(self.logger, report)
