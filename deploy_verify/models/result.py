"""Models for check execution results."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class CheckResult:
    """Result of a single check execution.

    Contains only the outcome - the category is known by the bucket holding it.
    """

    name: str
    status: Literal["PASSED", "FAILED"]
    duration_ms: int = 0
    error: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the check passed."""
        return self.status == "PASSED"


@dataclass(kw_only=True)
class CategoryResults:
    """Accumulated results for one category, in execution order."""

    passed: int = 0
    failed: int = 0
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of checks recorded in this category."""
        return self.passed + self.failed

    def record(self, result: CheckResult) -> None:
        """Append a result and bump the matching counter."""
        self.checks.append(result)
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1
