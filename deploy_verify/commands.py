"""Running external tools (type checker, linter, bundler) as child processes."""

import asyncio
import logging
import shlex
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandResult:
    """Outcome of a finished command."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.exit_code == 0


class CommandError(Exception):
    """Base class for command failures."""


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], result: CommandResult) -> None:
        self.command = tuple(command)
        self.result = result
        super().__init__(
            f"Command failed: {shlex.join(command)} (exit code {result.exit_code})"
            f"\n{result.stderr}{result.stdout}"
        )


class CommandTimeoutError(CommandError, TimeoutError):
    """Raised when a command does not finish within its timeout."""


class CommandSpawnError(CommandError):
    """Raised when the program cannot be started, e.g. it is not installed."""


class CommandRunner(ABC):
    """Capability for running external commands.

    Checks only talk to this interface so they can be exercised without
    spawning real processes.
    """

    @abstractmethod
    async def run(self, command: Sequence[str], *, timeout: float) -> CommandResult:
        """Run a command to completion.

        Args:
            command: Program and arguments
            timeout: Maximum run time in seconds

        Returns:
            Exit code and captured output

        Raises:
            CommandSpawnError: If the program cannot be started
            CommandTimeoutError: If the command does not finish in time

        """


@dataclass(frozen=True, kw_only=True)
class SubprocessCommandRunner(CommandRunner):
    """Runs commands as local child processes."""

    cwd: Path

    async def run(self, command: Sequence[str], *, timeout: float) -> CommandResult:
        """Spawn the command and capture its output."""
        log.debug("Running command: %s (cwd=%s)", shlex.join(command), self.cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=self.cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CommandSpawnError(
                f"Could not start command: {shlex.join(command)}: {exc}"
            ) from exc
        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
        except TimeoutError:
            process.kill()
            await process.wait()
            raise CommandTimeoutError(
                f"Command timed out after {timeout:g}s: {shlex.join(command)}"
            ) from None

        return CommandResult(
            exit_code=await process.wait(),
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )
