"""Exceptions raised by the test harness."""


class HarnessError(Exception):
    """Base class for all harness errors."""


class ElementNotFoundError(HarnessError):
    """Raised when an element is not registered before the lookup deadline."""

    def __init__(self, identifier: str, timeout: float) -> None:
        super().__init__(
            f"Could not find element '{identifier}' within {timeout} seconds"
        )
        self.identifier = identifier
        self.timeout = timeout


class TimedOutError(HarnessError):
    """Raised when a test case does not settle within its time bound."""

    def __init__(self, description: str, timeout: float) -> None:
        super().__init__(f"Test case '{description}' timed out after {timeout}s")
        self.description = description
        self.timeout = timeout


class DuplicateIdentifierError(HarnessError):
    """Raised by a strict registry when an identifier is bound twice."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Identifier '{identifier}' is already bound to another element"
        )
        self.identifier = identifier


class ScopeClosedError(HarnessError):
    """Raised when a case is declared on a scope that is no longer collecting."""


class ReporterTransmissionError(HarnessError):
    """Raised when a reporter fails to deliver a report."""


class HarnessFault(HarnessError):
    """Raised when the harness' own bookkeeping fails and the run must stop."""
