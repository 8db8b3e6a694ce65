"""Fixtures for check tests backed by fake capabilities."""

from pathlib import Path

import pytest

from deploy_verify.checks.base import VerificationContext
from deploy_verify.config import VerificationConfig
from deploy_verify.testing.fakes import FakeCommandRunner, FakeProbe

BASE_URL = "http://app.test"


@pytest.fixture
def config(tmp_path: Path) -> VerificationConfig:
    """Create configuration pointing at a temporary project."""
    return VerificationConfig(base_url=BASE_URL, project_dir=tmp_path)


@pytest.fixture
def commands() -> FakeCommandRunner:
    """Create command runner where every command succeeds."""
    return FakeCommandRunner()


@pytest.fixture
def fake_probe() -> FakeProbe:
    """Create probe without canned responses."""
    return FakeProbe()


@pytest.fixture
def context(
    config: VerificationConfig, commands: FakeCommandRunner, fake_probe: FakeProbe
) -> VerificationContext:
    """Create context wired to the fakes."""
    return VerificationContext(
        config=config, commands=commands, probe=fake_probe, environ={}
    )
