"""Models for test run results and the aggregated report."""

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any, Literal, TypeAlias

CaseStatus: TypeAlias = Literal["passed", "failed", "timed_out", "skipped"]


@dataclass(frozen=True, kw_only=True)
class TestRunResult:
    """Outcome of a single test case.

    Created once, when the case finishes or is abandoned.
    """

    __test__ = False

    description: str
    suite_index: int
    case_index: int
    status: CaseStatus
    duration: float
    error: str | None = None
    error_type: str | None = None
    traceback: str | None = None


@dataclass(frozen=True, kw_only=True)
class Report:
    """Final outcome of a full test run."""

    results: Sequence[TestRunResult]
    total_count: int
    passed_count: int
    failed_count: int
    timed_out_count: int
    skipped_count: int
    duration: float
    complete: bool = True

    @classmethod
    def from_results(
        cls,
        results: Sequence[TestRunResult],
        duration: float,
        *,
        complete: bool = True,
    ) -> "Report":
        """Build a report, deriving the counts from the results."""
        counts: dict[CaseStatus, int] = {
            "passed": 0,
            "failed": 0,
            "timed_out": 0,
            "skipped": 0,
        }
        for result in results:
            counts[result.status] += 1

        return cls(
            results=tuple(results),
            total_count=len(results),
            passed_count=counts["passed"],
            failed_count=counts["failed"],
            timed_out_count=counts["timed_out"],
            skipped_count=counts["skipped"],
            duration=duration,
            complete=complete,
        )

    @property
    def has_failures(self) -> bool:
        """Whether any case failed or timed out."""
        return self.failed_count > 0 or self.timed_out_count > 0

    def to_dict(self) -> Mapping[str, Any]:
        """Encode the report as JSON-compatible data."""
        data = asdict(self)
        data["results"] = [asdict(result) for result in self.results]
        return data
