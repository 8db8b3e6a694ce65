"""Tests for the verification orchestrator."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import pytest

from deploy_verify.checks.base import (
    CATEGORY_ORDER,
    Check,
    CheckFailure,
    CheckFunc,
    CheckSuite,
    VerificationContext,
)
from deploy_verify.config import VerificationConfig
from deploy_verify.models.result import CheckResult
from deploy_verify.orchestrator import VerificationOrchestrator
from deploy_verify.runner import TestRunner
from deploy_verify.testing.fakes import FakeCommandRunner, FakeProbe


@pytest.fixture
def context() -> VerificationContext:
    """Create context backed by fakes."""
    return VerificationContext(
        config=VerificationConfig(),
        commands=FakeCommandRunner(),
        probe=FakeProbe(),
        environ={},
    )


def recorder(calls: list[str], label: str, *, fail: bool = False) -> CheckFunc:
    """Create a check that records its invocation."""

    async def check(ctx: VerificationContext) -> None:
        calls.append(label)
        if fail:
            raise CheckFailure(f"{label} failed")

    return check


@dataclass(frozen=True, kw_only=True)
class ExplodingRunner(TestRunner):
    """Runner that breaks outside its capture boundary for one check."""

    explode_on: str

    async def run_check(
        self,
        category: str,
        name: str,
        check: Callable[[], Awaitable[None]],
    ) -> CheckResult:
        """Raise for the configured check, delegate otherwise."""
        if name == self.explode_on:
            raise RuntimeError("runner broke")
        return await super().run_check(category, name, check)


async def test_runs_suites_in_category_order(context: VerificationContext) -> None:
    """Suites run build first and performance last regardless of registration."""
    calls: list[str] = []
    suites = [
        CheckSuite(
            category=category,
            checks=[Check(name=category, func=recorder(calls, category))],
        )
        for category in reversed(CATEGORY_ORDER)
    ]
    orchestrator = VerificationOrchestrator(runner=TestRunner(), suites=suites)

    await orchestrator.run(context)

    assert calls == list(CATEGORY_ORDER)


async def test_every_category_is_reported(context: VerificationContext) -> None:
    """Categories without a suite still get an empty bucket, in order."""
    orchestrator = VerificationOrchestrator(runner=TestRunner(), suites=[])

    results = await orchestrator.run(context)

    assert list(results) == list(CATEGORY_ORDER)
    assert all(bucket.total == 0 for bucket in results.values())


async def test_runs_each_check_once_in_order(context: VerificationContext) -> None:
    """Every check runs exactly once and a failure does not stop its siblings."""
    calls: list[str] = []
    suite = CheckSuite(
        category="api",
        checks=[
            Check(name="one", func=recorder(calls, "one")),
            Check(name="two", func=recorder(calls, "two", fail=True)),
            Check(name="three", func=recorder(calls, "three")),
        ],
    )
    orchestrator = VerificationOrchestrator(runner=TestRunner(), suites=[suite])

    results = await orchestrator.run(context)

    assert calls == ["one", "two", "three"]
    assert results["api"].passed == 2
    assert results["api"].failed == 1
    assert results["api"].checks[1].error == "two failed"


async def test_harness_error_skips_rest_of_suite_only(
    context: VerificationContext, caplog: pytest.LogCaptureFixture
) -> None:
    """An error escaping the runner skips the suite but not later categories."""
    calls: list[str] = []
    suites = [
        CheckSuite(
            category="build",
            checks=[
                Check(name="compile", func=recorder(calls, "compile")),
                Check(name="explode", func=recorder(calls, "explode")),
                Check(name="artifacts", func=recorder(calls, "artifacts")),
            ],
        ),
        CheckSuite(
            category="api",
            checks=[Check(name="health", func=recorder(calls, "health"))],
        ),
    ]
    runner = ExplodingRunner(explode_on="explode")
    orchestrator = VerificationOrchestrator(runner=runner, suites=suites)

    with caplog.at_level(logging.ERROR):
        results = await orchestrator.run(context)

    assert calls == ["compile", "health"]
    assert [check.name for check in results["build"].checks] == ["compile"]
    assert results["api"].passed == 1
    assert "Unexpected error while running build checks" in caplog.text
    assert "runner broke" in caplog.text


async def test_passes_context_to_checks(context: VerificationContext) -> None:
    """Checks receive the orchestrator's context."""
    seen: list[VerificationContext] = []

    async def check(ctx: VerificationContext) -> None:
        seen.append(ctx)

    suite = CheckSuite(category="security", checks=[Check(name="ctx", func=check)])
    orchestrator = VerificationOrchestrator(runner=TestRunner(), suites=[suite])

    await orchestrator.run(context)

    assert seen == [context]
