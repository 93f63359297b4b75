"""Entry point wiring the registry, specs, runner and reporter together."""

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeAlias

from app_test_harness.config import HarnessConfig
from app_test_harness.errors import HarnessFault
from app_test_harness.host import Host, KeyValueStore, clear_persistent_store
from app_test_harness.lookup import ElementFinder, PollingElementFinder
from app_test_harness.models.result import Report
from app_test_harness.registry import ElementRegistry
from app_test_harness.reporters.base import Reporter
from app_test_harness.reporters.callback import (
    CallbackReporter,
    ReportCallback,
    SinkReporter,
    has_reporter_hooks,
)
from app_test_harness.reporters.loading import load_reporter
from app_test_harness.runner import TestRunner
from app_test_harness.scope import TestScope

log = logging.getLogger(__name__)

Spec: TypeAlias = Callable[[TestScope], Awaitable[None] | None]
ReporterOption: TypeAlias = Reporter | type | ReportCallback | object | None


def resolve_reporter(reporter: ReporterOption, default_key: str) -> Reporter:
    """Turn the reporter option into a Reporter instance.

    Args:
        reporter: A reporter or reporter class, an object or class exposing
            reporter hooks, a report callback, or None
        default_key: Entry point key of the reporter to use when None

    Returns:
        The reporter to hand results to

    Raises:
        TypeError: If reporter is neither a sink nor callable

    """
    if reporter is None:
        return load_reporter(default_key)()
    if isinstance(reporter, Reporter):
        return reporter
    if isinstance(reporter, type):
        if issubclass(reporter, Reporter):
            return reporter()
        if has_reporter_hooks(reporter):
            return SinkReporter(sink=reporter())
    elif has_reporter_hooks(reporter):
        return SinkReporter(sink=reporter)

    if not callable(reporter):
        raise TypeError(f"Unsupported reporter: {reporter!r}")

    log.warning(
        "Deprecation warning: function reporters will be removed in a future "
        "release, subclass app_test_harness.reporters.Reporter instead"
    )
    return CallbackReporter(callback=reporter)


class Tester:
    """Runs specs against a live UI tree.

    The host application creates an ElementRegistry, registers its
    discoverable elements into it as they mount, and hands it to the Tester
    together with its spec functions:

        registry = ElementRegistry()
        tester = Tester(
            specs=[login_spec, settings_spec],
            registry=registry,
            host=app,
            config=HarnessConfig(wait_time=3.0),
        )
        report = await tester.run_tests()
    """

    __test__ = False

    def __init__(
        self,
        *,
        specs: Sequence[Spec],
        registry: ElementRegistry,
        host: Host,
        config: HarnessConfig | None = None,
        reporter: ReporterOption = None,
        store: KeyValueStore | None = None,
        finder: ElementFinder | None = None,
    ) -> None:
        self.specs = specs
        self.registry = registry
        self.host = host
        self.config = config or HarnessConfig()
        self.store = store
        self.finder = finder or PollingElementFinder(
            registry=registry, poll_interval=self.config.poll_interval
        )
        self.reporter = resolve_reporter(reporter, self.config.reporter)

    async def run_tests(self) -> Report:
        """Collect every spec's cases and run them.

        Returns:
            The final report

        Raises:
            HarnessFault: If a spec fails while declaring its cases or the
                host cannot be reached during the run

        """
        scopes = await self.collect_scopes()

        runner = TestRunner(
            component=self,
            scopes=scopes,
            reporter=self.reporter,
            case_timeout=self.config.effective_case_timeout,
            start_delay=self.config.start_delay,
            only=self.config.only,
        )
        return await runner.run()

    async def collect_scopes(self) -> Sequence[TestScope]:
        """Invoke each spec with a fresh scope and freeze its cases."""
        scopes: list[TestScope] = []
        for spec in self.specs:
            scope = TestScope(self, self.registry, self.finder, self.config.wait_time)
            try:
                result = spec(scope)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                name = getattr(spec, "__name__", repr(spec))
                raise HarnessFault(f"Spec {name} failed to declare cases: {e}") from e
            scope.freeze()
            scopes.append(scope)

        log.info(
            "Collected %d case(s) from %d spec(s)",
            sum(len(scope.cases) for scope in scopes),
            len(scopes),
        )
        return scopes

    async def re_render(self) -> None:
        """Ask the host to remount the UI under test."""
        await self.host.request_rerender()

    async def clear_async(self) -> None:
        """Clear the persistent store if configured to."""
        if not self.config.clear_persistent_store:
            return
        if self.store is None:
            log.warning("clear_persistent_store is set but no store was provided")
            return
        await clear_persistent_store(self.store)
