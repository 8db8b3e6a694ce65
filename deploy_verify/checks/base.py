"""Building blocks shared by all check suites."""

import time
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, TypeAlias

from deploy_verify.commands import (
    CommandError,
    CommandFailedError,
    CommandResult,
    CommandRunner,
)
from deploy_verify.config import VerificationConfig
from deploy_verify.probe import Probe, ProbeResponse

Category: TypeAlias = Literal[
    "build", "environment", "database", "api", "security", "performance"
]

# Later categories assume the application is built and configured.
CATEGORY_ORDER: Sequence[Category] = (
    "build",
    "environment",
    "database",
    "api",
    "security",
    "performance",
)


class CheckFailure(Exception):
    """Raised by a check when its assertion does not hold."""


@dataclass(frozen=True, kw_only=True)
class VerificationContext:
    """Everything a check needs to talk to the outside world."""

    config: VerificationConfig
    commands: CommandRunner
    probe: Probe
    environ: Mapping[str, str]
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    async def get(self, path: str, **kwargs: Any) -> ProbeResponse:
        """Probe a path on the target service with the configured timeout."""
        return await self.probe(
            self.config.url_for(path), timeout=self.config.timeout, **kwargs
        )

    async def run_command(
        self, command: Sequence[str], *, timeout: float | None = None
    ) -> CommandResult:
        """Run a command, raising CommandFailedError on a non-zero exit."""
        result = await self.commands.run(
            command, timeout=timeout if timeout is not None else self.config.timeout
        )
        if not result.ok:
            raise CommandFailedError(command, result)
        return result

    async def require_command(
        self,
        command: Sequence[str],
        failure: str,
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        """Run a command and turn any command error into a CheckFailure."""
        try:
            return await self.run_command(command, timeout=timeout)
        except CommandError as exc:
            raise CheckFailure(f"{failure}: {exc}") from exc

    def project_path(self, relative: str) -> Path:
        """Resolve a path inside the project directory."""
        return self.config.project_dir / relative


CheckFunc: TypeAlias = Callable[[VerificationContext], Awaitable[None]]


@dataclass(frozen=True, kw_only=True)
class Check:
    """A named check function."""

    name: str
    func: CheckFunc


@dataclass(frozen=True, kw_only=True)
class CheckSuite:
    """Ordered checks registered under one category."""

    category: Category
    checks: Sequence[Check]
