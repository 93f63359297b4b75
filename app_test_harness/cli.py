"""CLI entry point for the report collector."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from app_test_harness.collector import collect_report
from app_test_harness.models.result import Report
from app_test_harness.reporters.console import log_results_summary

EXIT_NO_REPORT = 2


def format_output(report: Report) -> dict[str, Any]:
    """Format a report for JSON output."""
    return {
        "total": report.total_count,
        "passed": report.passed_count,
        "failed": report.failed_count,
        "timed_out": report.timed_out_count,
        "skipped": report.skipped_count,
        "complete": report.complete,
        "duration": report.duration,
        "results": [
            {
                "description": result.description,
                "status": result.status,
                "duration": result.duration,
                "error_type": result.error_type,
                "error": result.error,
            }
            for result in report.results
        ],
    }


async def run(host: str, port: int, timeout: float) -> int:
    """Collect one report and return exit code."""
    log = logging.getLogger("app_test_harness")

    try:
        report = await collect_report(host, port, timeout)
    except TimeoutError:
        log.error("No report received within %ss", timeout)
        return EXIT_NO_REPORT

    log_results_summary(log, report)
    print(json.dumps(format_output(report), indent=2))

    return 1 if report.has_failures or not report.complete else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Wait for an in-app test run to report its results"
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8082, help="Port to bind")
    parser.add_argument(
        "--timeout",
        type=float,
        default=600.0,
        help="Seconds to wait for the report",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(run(host=args.host, port=args.port, timeout=args.timeout))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
