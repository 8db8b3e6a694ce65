"""Environment configuration checks."""

from deploy_verify.checks.base import (
    Check,
    CheckFailure,
    CheckSuite,
    VerificationContext,
)

ENV_FILES = (".env", ".env.local")


async def check_required_variables(ctx: VerificationContext) -> None:
    """Every required variable must be set to a non-empty value."""
    missing = [
        name for name in ctx.config.required_env_vars if not ctx.environ.get(name)
    ]
    if missing:
        raise CheckFailure(
            f"Missing required environment variables: {', '.join(missing)}"
        )


async def check_env_file(ctx: VerificationContext) -> None:
    """At least one environment file must exist in the project."""
    if not any(ctx.project_path(name).exists() for name in ENV_FILES):
        raise CheckFailure("No environment file found (.env or .env.local)")


async def check_config_validation(ctx: VerificationContext) -> None:
    """Run the project's own configuration validator."""
    await ctx.require_command(
        ("npm", "run", "config:verify"), "Configuration validation failed"
    )


SUITE = CheckSuite(
    category="environment",
    checks=(
        Check(name="Required Environment Variables", func=check_required_variables),
        Check(name="Environment File Exists", func=check_env_file),
        Check(name="Configuration Validation", func=check_config_validation),
    ),
)
