"""Rendering of the verification report and the process exit code."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from deploy_verify.models.result import CategoryResults, CheckResult

STATUS_SYMBOLS = {
    "PASSED": "✓",
    "FAILED": "✗",
}

RULE = "=" * 60


@dataclass(frozen=True, kw_only=True)
class Summary:
    """Totals across all categories."""

    total: int
    passed: int
    failed: int

    @property
    def success_rate(self) -> float:
        """Percentage of passed checks; 0.0 when nothing ran."""
        if not self.total:
            return 0.0
        return self.passed / self.total * 100


def summarize(results: Mapping[str, CategoryResults]) -> Summary:
    """Compute totals across all categories."""
    passed = sum(category.passed for category in results.values())
    failed = sum(category.failed for category in results.values())
    return Summary(total=passed + failed, passed=passed, failed=failed)


def exit_code(results: Mapping[str, CategoryResults]) -> int:
    """Return 0 when no check failed, 1 otherwise."""
    return 1 if summarize(results).failed else 0


def format_check(result: CheckResult) -> list[str]:
    """Format the report lines for one check."""
    symbol = STATUS_SYMBOLS.get(result.status, "?")
    duration = f" ({result.duration_ms}ms)" if result.duration_ms else ""
    lines = [f"  {symbol} {result.name}{duration}"]
    if result.error:
        lines.append(f"    Error: {result.error}")
    return lines


def render_report(results: Mapping[str, CategoryResults]) -> str:
    """Render the human-readable report.

    The header carries the totals, followed by one block per category listing
    every check, and a closing verdict.
    """
    summary = summarize(results)
    lines = [
        "",
        RULE,
        "DEPLOYMENT VERIFICATION REPORT",
        RULE,
        f"Total Tests: {summary.total}",
        f"Passed: {summary.passed}",
        f"Failed: {summary.failed}",
        f"Success Rate: {summary.success_rate:.1f}%",
        RULE,
    ]

    for category, category_results in results.items():
        lines.append("")
        lines.append(f"{category.upper()}:")
        lines.append(
            f"  Passed: {category_results.passed}, Failed: {category_results.failed}"
        )
        for result in category_results.checks:
            lines.extend(format_check(result))

    lines.extend(["", RULE, ""])
    if summary.failed:
        lines.append("❌ DEPLOYMENT VERIFICATION FAILED")
        lines.append(
            f"{summary.failed} test(s) failed. "
            "Please review and fix issues before deploying."
        )
    else:
        lines.append("✅ DEPLOYMENT VERIFICATION PASSED")
        lines.append("All tests passed. Deployment is ready!")

    return "\n".join(lines)


def format_output(results: Mapping[str, CategoryResults]) -> dict[str, Any]:
    """Format results for JSON output."""
    summary = summarize(results)
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "success_rate": round(summary.success_rate, 1),
        "categories": {
            category: {
                "passed": category_results.passed,
                "failed": category_results.failed,
                "checks": [
                    {
                        "name": result.name,
                        "status": result.status,
                        "duration_ms": result.duration_ms,
                        "error": result.error,
                    }
                    for result in category_results.checks
                ],
            }
            for category, category_results in results.items()
        },
    }
