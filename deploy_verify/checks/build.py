"""Build process checks."""

from deploy_verify.checks.base import (
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)

BUILD_ID = ".next/BUILD_ID"
REQUIRED_ARTIFACTS = (".next/static", ".next/server", BUILD_ID)


async def check_type_check(ctx: VerificationContext) -> None:
    """Run the type checker."""
    await ctx.require_command(
        ("npm", "run", "type-check"), "TypeScript compilation failed"
    )


async def check_lint(ctx: VerificationContext) -> None:
    """Run the linter."""
    await ctx.require_command(("npm", "run", "lint"), "ESLint validation failed")


async def check_production_build(ctx: VerificationContext) -> None:
    """Run the production build and confirm it produced a build identifier."""
    await ctx.require_command(
        ("npm", "run", "build"),
        "Production build failed",
        timeout=ctx.config.build_timeout,
    )
    if not ctx.project_path(BUILD_ID).exists():
        raise CheckFailure("Production build failed: Build output not found")


async def check_build_artifacts(ctx: VerificationContext) -> None:
    """Confirm the build left the expected artifacts behind."""
    for artifact in REQUIRED_ARTIFACTS:
        if not ctx.project_path(artifact).exists():
            raise CheckFailure(f"Required build artifact missing: {artifact}")


SUITE = CheckSuite(
    category="build",
    checks=(
        Check(name="TypeScript Compilation", func=check_type_check),
        Check(name="ESLint Validation", func=check_lint),
        Check(name="Production Build", func=check_production_build),
        Check(name="Build Artifacts Validation", func=check_build_artifacts),
    ),
)
