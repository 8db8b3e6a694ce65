"""Check suites, one per category."""

from collections.abc import Sequence

from deploy_verify.checks import (
    api,
    build,
    database,
    environment,
    performance,
    security,
)
from deploy_verify.checks.base import (
    CATEGORY_ORDER,
    Category,
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)

DEFAULT_SUITES: Sequence[CheckSuite] = (
    build.SUITE,
    environment.SUITE,
    database.SUITE,
    api.SUITE,
    security.SUITE,
    performance.SUITE,
)

__all__ = [
    "CATEGORY_ORDER",
    "DEFAULT_SUITES",
    "Category",
    "Check",
    "CheckFailure",
    "CheckSuite",
    "VerificationContext",
]
