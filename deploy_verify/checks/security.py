"""Security header checks."""

import logging

from deploy_verify.checks.base import (
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)
from deploy_verify.probe import ProbeError

log = logging.getLogger(__name__)

CSP_HEADERS = ("content-security-policy", "content-security-policy-report-only")
REDIRECT_STATUSES = {301, 302}


async def check_security_headers(ctx: VerificationContext) -> None:
    """The site root must send every required security header."""
    response = await ctx.get("/")
    missing = [
        header
        for header in ctx.config.required_security_headers
        if header not in response.headers
    ]
    if missing:
        raise CheckFailure(f"Missing security headers: {', '.join(missing)}")


async def check_content_security_policy(ctx: VerificationContext) -> None:
    """The site root must send a CSP, enforcing or report-only."""
    response = await ctx.get("/")
    if not any(header in response.headers for header in CSP_HEADERS):
        raise CheckFailure("Content Security Policy header not found")


async def check_https_redirect(ctx: VerificationContext) -> None:
    """Plain HTTP should redirect to HTTPS. Findings are warnings only."""
    base_url = ctx.config.base_url
    if not base_url.startswith("https://"):
        log.info("Skipping HTTPS redirect test (testing HTTP endpoint)")
        return

    http_url = "http://" + base_url.removeprefix("https://")
    try:
        response = await ctx.probe(http_url, timeout=ctx.config.timeout)
    except ProbeError:
        log.info("HTTP endpoint not available (expected for HTTPS-only)")
        return

    if response.status_code not in REDIRECT_STATUSES:
        log.warning(
            "HTTPS redirect not configured: %s returned %d",
            http_url,
            response.status_code,
        )


SUITE = CheckSuite(
    category="security",
    checks=(
        Check(name="Security Headers Present", func=check_security_headers),
        Check(name="Content Security Policy", func=check_content_security_policy),
        Check(name="HTTPS Redirect (if applicable)", func=check_https_redirect),
    ),
)
