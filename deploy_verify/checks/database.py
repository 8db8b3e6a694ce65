"""Database connectivity checks."""

from deploy_verify.checks.base import Check, CheckSuite, VerificationContext

# Evaluated by node inside the project so the generated client is resolved.
CONNECT_SCRIPT = """\
const { PrismaClient } = require('@prisma/client');
const prisma = new PrismaClient();
prisma.$connect()
  .then(() => prisma.$disconnect())
  .then(() => process.exit(0))
  .catch((error) => {
    console.error('Database connection failed:', error);
    process.exit(1);
  });
"""


async def check_client_generation(ctx: VerificationContext) -> None:
    """Generate the ORM client."""
    await ctx.require_command(
        ("npm", "run", "db:generate"), "Prisma client generation failed"
    )


async def check_connection(ctx: VerificationContext) -> None:
    """Open and close a database connection through the generated client."""
    await ctx.require_command(
        ("node", "-e", CONNECT_SCRIPT), "Database connection test failed"
    )


async def check_schema(ctx: VerificationContext) -> None:
    """Validate the database schema definition."""
    await ctx.require_command(
        ("npx", "prisma", "validate"), "Database schema validation failed"
    )


SUITE = CheckSuite(
    category="database",
    checks=(
        Check(name="Prisma Client Generation", func=check_client_generation),
        Check(name="Database Connection", func=check_connection),
        Check(name="Database Schema Validation", func=check_schema),
    ),
)
