"""Verification orchestrator running check suites category by category."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import partial

from deploy_verify.checks.base import CATEGORY_ORDER, CheckSuite, VerificationContext
from deploy_verify.models.result import CategoryResults
from deploy_verify.runner import TestRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class VerificationOrchestrator:
    """Runs registered suites in category order, one check at a time."""

    runner: TestRunner
    suites: Sequence[CheckSuite]

    async def run(
        self, context: VerificationContext
    ) -> Mapping[str, CategoryResults]:
        """Run every registered check exactly once.

        Checks run sequentially so that expensive commands such as builds never
        overlap. An error escaping the runner aborts only the current suite.

        Args:
            context: Context handed to every check

        Returns:
            Results keyed by category, in category order

        """
        results = self.runner.results
        for category in CATEGORY_ORDER:
            results.setdefault(category, CategoryResults())

        for suite in self._ordered_suites():
            log.info(
                "Testing %s (%d check(s))...", suite.category, len(suite.checks)
            )
            try:
                for check in suite.checks:
                    await self.runner.run_check(
                        suite.category, check.name, partial(check.func, context)
                    )
            except Exception:
                log.exception(
                    "Unexpected error while running %s checks, skipping the rest",
                    suite.category,
                )

        return results

    def _ordered_suites(self) -> Sequence[CheckSuite]:
        """Sort suites by their category's position in the run order."""
        return sorted(
            self.suites, key=lambda suite: CATEGORY_ORDER.index(suite.category)
        )
