"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from app_test_harness.config import (
    DEFAULT_COLLECTOR_URL,
    CollectorConfig,
    HarnessConfig,
)


def test_defaults() -> None:
    """Defaults match the documented options."""
    config = HarnessConfig()

    assert config.wait_time == 2.0
    assert config.start_delay == 0.0
    assert config.only is None
    assert config.clear_persistent_store is False
    assert config.reporter == "collector"
    assert config.effective_case_timeout == 2.0


def test_case_timeout_overrides_wait_time() -> None:
    """A separate case timeout takes precedence."""
    config = HarnessConfig(wait_time=1.0, case_timeout=5.0)

    assert config.effective_case_timeout == 5.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"wait_time": 0},
        {"start_delay": -1},
        {"case_timeout": 0},
        {"poll_interval": 0},
    ],
)
def test_rejects_invalid_values(kwargs: dict[str, float]) -> None:
    """Rejects non-positive bounds and negative delays."""
    with pytest.raises(ValidationError):
        HarnessConfig(**kwargs)


def test_config_is_frozen() -> None:
    """Configuration cannot be changed after startup."""
    config = HarnessConfig()

    with pytest.raises(ValidationError):
        config.wait_time = 5.0  # type: ignore[misc]


def test_collector_defaults() -> None:
    """Collector config points at the local collector."""
    config = CollectorConfig()

    assert config.url == DEFAULT_COLLECTOR_URL
    assert config.path == "/report"
