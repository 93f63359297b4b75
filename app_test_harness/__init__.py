"""In-app integration test harness."""

from app_test_harness.config import CollectorConfig, HarnessConfig
from app_test_harness.errors import (
    DuplicateIdentifierError,
    ElementNotFoundError,
    HarnessError,
    HarnessFault,
    ReporterTransmissionError,
    ScopeClosedError,
    TimedOutError,
)
from app_test_harness.lookup import ElementFinder, PollingElementFinder, find_element
from app_test_harness.models.result import Report, TestRunResult
from app_test_harness.registry import ElementRegistry, registered
from app_test_harness.runner import TestRunner
from app_test_harness.scope import TestScope
from app_test_harness.tester import Tester

__all__ = [
    "CollectorConfig",
    "DuplicateIdentifierError",
    "ElementFinder",
    "ElementNotFoundError",
    "ElementRegistry",
    "HarnessConfig",
    "HarnessError",
    "HarnessFault",
    "PollingElementFinder",
    "Report",
    "ReporterTransmissionError",
    "ScopeClosedError",
    "TestRunResult",
    "TestRunner",
    "TestScope",
    "Tester",
    "TimedOutError",
    "find_element",
    "registered",
]
