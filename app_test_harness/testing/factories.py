"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory

from app_test_harness.models.result import TestRunResult


class TestRunResultFactory(DataclassFactory[TestRunResult]):
    """Factory for TestRunResult."""

    __model__ = TestRunResult

    suite_index = 0
    case_index = 0
    status = "passed"
    duration = 0.5
    error = None
    error_type = None
    traceback = None
