"""Tests for CLI module."""

from unittest.mock import AsyncMock, patch

import pytest

from app_test_harness.cli import EXIT_NO_REPORT, format_output, run
from app_test_harness.models.result import Report
from app_test_harness.testing.factories import TestRunResultFactory


def test_format_output_empty() -> None:
    """Returns empty totals when no results."""
    output = format_output(Report.from_results([], duration=0.0))

    assert output == {
        "total": 0,
        "passed": 0,
        "failed": 0,
        "timed_out": 0,
        "skipped": 0,
        "complete": True,
        "duration": 0.0,
        "results": [],
    }


def test_format_output_mixed_results() -> None:
    """Formats mixed results with correct totals."""
    report = Report.from_results(
        [
            TestRunResultFactory.build(status="passed"),
            TestRunResultFactory.build(status="failed", error="x"),
            TestRunResultFactory.build(status="timed_out"),
            TestRunResultFactory.build(status="skipped"),
        ],
        duration=3.0,
    )

    output = format_output(report)

    assert output["total"] == 4
    assert output["passed"] == 1
    assert output["failed"] == 1
    assert output["timed_out"] == 1
    assert output["skipped"] == 1
    assert output["results"][1]["error"] == "x"


class TestRun:
    """Tests for run function."""

    async def test_returns_zero_when_all_pass(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Returns 0 and prints the summary when every case passed."""
        report = Report.from_results(
            [TestRunResultFactory.build(status="passed")], duration=1.0
        )

        with patch(
            "app_test_harness.cli.collect_report",
            new_callable=AsyncMock,
            return_value=report,
        ) as mock_collect:
            exit_code = await run(host="127.0.0.1", port=8082, timeout=10.0)

        assert exit_code == 0
        mock_collect.assert_awaited_once_with("127.0.0.1", 8082, 10.0)
        assert '"passed": 1' in capsys.readouterr().out

    @pytest.mark.parametrize("status", ["failed", "timed_out"])
    async def test_returns_one_on_failures(self, status: str) -> None:
        """Returns 1 when any case failed or timed out."""
        report = Report.from_results(
            [TestRunResultFactory.build(status=status)], duration=1.0
        )

        with patch(
            "app_test_harness.cli.collect_report",
            new_callable=AsyncMock,
            return_value=report,
        ):
            exit_code = await run(host="127.0.0.1", port=8082, timeout=10.0)

        assert exit_code == 1

    async def test_returns_one_for_partial_report(self) -> None:
        """Returns 1 when the run was aborted."""
        report = Report.from_results([], duration=1.0, complete=False)

        with patch(
            "app_test_harness.cli.collect_report",
            new_callable=AsyncMock,
            return_value=report,
        ):
            exit_code = await run(host="127.0.0.1", port=8082, timeout=10.0)

        assert exit_code == 1

    async def test_returns_two_without_report(self) -> None:
        """Returns 2 when no report arrives in time."""
        with patch(
            "app_test_harness.cli.collect_report",
            new_callable=AsyncMock,
            side_effect=TimeoutError,
        ):
            exit_code = await run(host="127.0.0.1", port=8082, timeout=0.1)

        assert exit_code == EXIT_NO_REPORT


class TestMain:
    """Tests for main CLI entry point."""

    def test_exits_with_run_result(self) -> None:
        """Main function exits with the result from run()."""
        from app_test_harness.cli import main

        with (
            patch("sys.argv", ["cli", "--port", "9000", "--timeout", "30"]),
            patch("app_test_harness.cli.asyncio.run", return_value=1) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
        mock_run.assert_called_once()
        mock_run.call_args.args[0].close()
