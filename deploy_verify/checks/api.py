"""API route checks against the running service."""

import asyncio
import logging

from deploy_verify.checks.base import (
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)
from deploy_verify.probe import ProbeResponse

log = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"
SESSION_PATH = "/api/auth/session"


async def check_health(ctx: VerificationContext) -> None:
    """The health endpoint must answer successfully."""
    response = await ctx.get(HEALTH_PATH)
    if not response.success:
        raise CheckFailure(f"Health check failed: {response.status_code}")


async def check_auth_session(ctx: VerificationContext) -> None:
    """The session endpoint answers 401 when anonymous or 200 with a session."""
    response = await ctx.get(SESSION_PATH)
    if response.status_code not in {200, 401}:
        raise CheckFailure(f"Auth API unexpected status: {response.status_code}")


async def check_cors(ctx: VerificationContext) -> None:
    """A preflight request must be answered with an allowed origin."""
    response = await ctx.get(HEALTH_PATH, method="OPTIONS")
    if "access-control-allow-origin" not in response.headers:
        raise CheckFailure("CORS headers not configured properly")


async def check_rate_limiting(ctx: VerificationContext) -> None:
    """Fire a burst of concurrent requests and report whether any were limited.

    Only informational: high limits legitimately let the whole burst through.
    """
    burst = ctx.config.rate_limit_burst
    responses = await asyncio.gather(
        *(ctx.get(HEALTH_PATH) for _ in range(burst)), return_exceptions=True
    )

    completed: list[ProbeResponse] = []
    for response in responses:
        if isinstance(response, BaseException):
            raise response
        completed.append(response)

    limited = sum(1 for response in completed if response.status_code == 429)
    if limited:
        log.info(
            "Rate limiting is active: %d of %d requests returned 429", limited, burst
        )
    else:
        log.info(
            "No 429 responses in a burst of %d requests; limits may be higher", burst
        )


SUITE = CheckSuite(
    category="api",
    checks=(
        Check(name="Health Check Endpoint", func=check_health),
        Check(name="Authentication API", func=check_auth_session),
        Check(name="CORS Headers", func=check_cors),
        Check(name="Rate Limiting", func=check_rate_limiting),
    ),
)
