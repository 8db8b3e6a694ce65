"""Fixtures for module tests using WireMock testcontainers."""

from collections.abc import Generator
from pathlib import Path

import pytest
from testcontainers.core import testcontainers_config
from wiremock.client import Mappings
from wiremock.constants import Config
from wiremock.testing.testcontainer import WireMockContainer


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def wiremock_server() -> Generator[WireMockContainer, None, None]:
    """Start WireMock container using wiremock's testcontainer support."""
    with WireMockContainer(secure=False) as wm:
        Config.base_url = wm.get_url("__admin")
        yield wm
        print(wm.get_logs())


@pytest.fixture
def base_url(wiremock_server: WireMockContainer) -> Generator[str, None, None]:
    """Base URL of the stubbed application, with mappings reset per test."""
    Mappings.delete_all_mappings()
    yield wiremock_server.get_url("").rstrip("/")
    Mappings.delete_all_mappings()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory with build output and an env file."""
    (tmp_path / ".next" / "static").mkdir(parents=True)
    (tmp_path / ".next" / "server").mkdir()
    (tmp_path / ".next" / "BUILD_ID").write_text("build-123")
    (tmp_path / ".env.local").write_text("NEXTAUTH_SECRET=secret\n")
    return tmp_path
