"""Runs a single check and records its outcome."""

import logging
import time
from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass, field

from deploy_verify.models.result import CategoryResults, CheckResult

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestRunner:
    """Executes checks and converts their failures into results.

    A failing check never propagates its exception, so sibling checks keep
    running. Failed results carry no timing.
    """

    __test__ = False

    results: MutableMapping[str, CategoryResults] = field(default_factory=dict)
    clock: Callable[[], float] = time.monotonic

    async def run_check(
        self,
        category: str,
        name: str,
        check: Callable[[], Awaitable[None]],
    ) -> CheckResult:
        """Run a check and append its result to the category bucket.

        Args:
            category: Category the check is registered under
            name: Human-readable check name
            check: Zero-argument coroutine function; raising means failure

        Returns:
            The recorded result

        """
        log.info("Running %s: %s", category, name)
        start = self.clock()
        try:
            await check()
        except Exception as exc:
            result = CheckResult(
                name=name,
                status="FAILED",
                duration_ms=0,
                error=str(exc) or type(exc).__name__,
            )
            log.error("✗ %s: %s", name, result.error)
        else:
            duration_ms = max(0, round((self.clock() - start) * 1000))
            result = CheckResult(name=name, status="PASSED", duration_ms=duration_ms)
            log.info("✓ %s (%dms)", name, duration_ms)

        self.results.setdefault(category, CategoryResults()).record(result)
        return result
