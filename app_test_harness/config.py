"""Configuration for the test harness and its collector."""

from collections.abc import Sequence

from pydantic import Field

from app_test_harness.models.base import Model

DEFAULT_COLLECTOR_URL = "http://127.0.0.1:8082"


class HarnessConfig(Model):
    """Startup options recognized by the harness."""

    wait_time: float = Field(
        default=2.0,
        gt=0,
        description="Seconds to wait for elements and, by default, for each case",
    )
    case_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for each case (defaults to wait_time)",
    )
    start_delay: float = Field(
        default=0.0, ge=0, description="Seconds to wait before the first case"
    )
    only: Sequence[str] | None = Field(
        default=None,
        description="Run only cases whose description contains one of these",
    )
    clear_persistent_store: bool = Field(
        default=False, description="Clear the persistent store between cases"
    )
    reporter: str = Field(
        default="collector", description="Entry point key of the default reporter"
    )
    poll_interval: float = Field(
        default=0.05, gt=0, description="Seconds between element lookups"
    )

    @property
    def effective_case_timeout(self) -> float:
        """Time bound applied to each case."""
        return self.case_timeout if self.case_timeout is not None else self.wait_time


class CollectorConfig(Model):
    """Configuration for sending reports to the collector."""

    url: str = DEFAULT_COLLECTOR_URL
    path: str = "/report"
    timeout: float = Field(default=5.0, gt=0)
