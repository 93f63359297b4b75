"""Report sinks."""

from app_test_harness.reporters.base import Reporter
from app_test_harness.reporters.callback import CallbackReporter, SinkReporter
from app_test_harness.reporters.collector import CollectorReporter
from app_test_harness.reporters.console import ConsoleReporter
from app_test_harness.reporters.loading import ReporterNotFoundError, load_reporter

__all__ = [
    "CallbackReporter",
    "CollectorReporter",
    "ConsoleReporter",
    "Reporter",
    "ReporterNotFoundError",
    "SinkReporter",
    "load_reporter",
]
