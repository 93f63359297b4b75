"""Resolving the default reporter named in HarnessConfig.reporter."""

from importlib.metadata import entry_points

from app_test_harness.errors import HarnessError
from app_test_harness.reporters.base import Reporter

ENTRY_POINT_GROUP = "app_test_harness.reporters"


class ReporterNotFoundError(HarnessError):
    """Raised when HarnessConfig.reporter names no installed reporter."""


def load_reporter(key: str) -> type[Reporter]:
    """Load the reporter class registered under key.

    Reporters are installed as entry points, so third-party packages can add
    their own sinks next to the built-in "collector" and "console".

    Raises:
        ReporterNotFoundError: If nothing is registered under key, or the
            registered object is not a Reporter subclass

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        installed = entry_points(group=ENTRY_POINT_GROUP)
        available = sorted(entry.name for entry in installed)
        raise ReporterNotFoundError(
            f"HarnessConfig.reporter is '{key}', but no such reporter is "
            f"installed. Available reporters: {', '.join(available) or 'none'}"
        )

    entry = next(iter(matches))
    reporter_cls = entry.load()
    if not (isinstance(reporter_cls, type) and issubclass(reporter_cls, Reporter)):
        raise ReporterNotFoundError(
            f"Entry point '{key}' ({entry.value}) is not a Reporter subclass"
        )
    return reporter_cls
