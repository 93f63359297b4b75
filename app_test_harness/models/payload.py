"""Pydantic models for reports received by the collector."""

from collections.abc import Sequence

from pydantic import Field

from app_test_harness.models.base import Model
from app_test_harness.models.result import CaseStatus, Report, TestRunResult


class ResultPayload(Model):
    """A single test result as sent over the wire."""

    description: str
    suite_index: int = Field(..., ge=0)
    case_index: int = Field(..., ge=0)
    status: CaseStatus
    duration: float = Field(..., ge=0)
    error: str | None = None
    error_type: str | None = None
    traceback: str | None = None


class ReportPayload(Model):
    """A full report as sent over the wire."""

    results: Sequence[ResultPayload] = Field(default_factory=list)
    total_count: int = Field(..., ge=0)
    passed_count: int = Field(..., ge=0)
    failed_count: int = Field(..., ge=0)
    timed_out_count: int = Field(..., ge=0)
    skipped_count: int = Field(..., ge=0)
    duration: float = Field(..., ge=0)
    complete: bool = True

    def to_report(self) -> Report:
        """Convert the payload back into a report."""
        return Report(
            results=tuple(
                TestRunResult(**result.model_dump()) for result in self.results
            ),
            total_count=self.total_count,
            passed_count=self.passed_count,
            failed_count=self.failed_count,
            timed_out_count=self.timed_out_count,
            skipped_count=self.skipped_count,
            duration=self.duration,
            complete=self.complete,
        )
