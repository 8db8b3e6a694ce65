"""Response time and build output checks."""

import logging

from deploy_verify.checks.base import (
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)
from deploy_verify.commands import CommandError
from deploy_verify.probe import ProbeResponse

log = logging.getLogger(__name__)

STATIC_ASSETS = ".next/static"


async def timed_get(ctx: VerificationContext, path: str) -> tuple[ProbeResponse, int]:
    """Probe a path and return the response with its elapsed milliseconds."""
    start = ctx.clock()
    response = await ctx.get(path)
    return response, round((ctx.clock() - start) * 1000)


async def check_page_load(ctx: VerificationContext) -> None:
    """The site root must load within the page threshold."""
    threshold = ctx.config.page_load_threshold_ms
    response, elapsed_ms = await timed_get(ctx, "/")
    if not response.success:
        raise CheckFailure(f"Page load failed: {response.status_code}")
    if elapsed_ms > threshold:
        raise CheckFailure(
            f"Page load too slow: {elapsed_ms}ms (threshold: {threshold}ms)"
        )
    log.info("Page load time: %dms", elapsed_ms)


async def check_api_response(ctx: VerificationContext) -> None:
    """The health endpoint must answer within the API threshold."""
    threshold = ctx.config.api_response_threshold_ms
    response, elapsed_ms = await timed_get(ctx, "/api/health")
    if not response.success:
        raise CheckFailure(f"API request failed: {response.status_code}")
    if elapsed_ms > threshold:
        raise CheckFailure(
            f"API response too slow: {elapsed_ms}ms (threshold: {threshold}ms)"
        )
    log.info("API response time: %dms", elapsed_ms)


async def check_bundle(ctx: VerificationContext) -> None:
    """Run the bundle analyzer over existing build output.

    Missing build output fails the check; analyzer problems do not.
    """
    if not ctx.project_path(STATIC_ASSETS).exists():
        raise CheckFailure("Build artifacts not found for bundle analysis")

    try:
        await ctx.run_command(("npm", "run", "bundle:analyze"))
    except CommandError as exc:
        log.warning("Bundle analysis failed, continuing: %s", exc)
    else:
        log.info("Bundle analysis completed")


SUITE = CheckSuite(
    category="performance",
    checks=(
        Check(name="Page Load Time", func=check_page_load),
        Check(name="API Response Time", func=check_api_response),
        Check(name="Bundle Size Check", func=check_bundle),
    ),
)
