"""Reporter that sends the finished report to a collector process."""

import logging
from dataclasses import dataclass, field

import aiohttp

from app_test_harness.config import CollectorConfig
from app_test_harness.errors import ReporterTransmissionError
from app_test_harness.models.result import Report
from app_test_harness.reporters.base import Reporter

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CollectorReporter(Reporter):
    """Posts the report as JSON to the collector CLI, if one is listening.

    Delivery problems are logged and never fail the test run.
    """

    config: CollectorConfig = field(default_factory=CollectorConfig)

    async def on_complete(self, report: Report) -> None:
        """Send the report, logging a warning if it cannot be delivered."""
        try:
            await self.send(report)
        except ReporterTransmissionError as e:
            log.warning("Skipping report delivery: %s", e)

    async def send(self, report: Report) -> None:
        """Send the report to the collector.

        Raises:
            ReporterTransmissionError: If the collector is unreachable or
                rejects the report

        """
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        try:
            async with aiohttp.ClientSession(
                base_url=self.config.url, timeout=timeout
            ) as session:
                async with session.post(
                    self.config.path, json=report.to_dict()
                ) as response:
                    if response.status >= 300:
                        text = await response.text()
                        raise ReporterTransmissionError(
                            f"Collector rejected report: {response.status} {text}"
                        )
        except (aiohttp.ClientError, TimeoutError) as e:
            raise ReporterTransmissionError(
                f"Could not reach collector at {self.config.url}: {e}"
            ) from e

        log.info("Report sent to collector at %s", self.config.url)
