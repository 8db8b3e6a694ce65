"""Configuration for a verification run."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Self

from pydantic import BaseModel

DEFAULT_BASE_URL = "http://localhost:3000"


class VerificationConfig(BaseModel):
    """Configuration for the deployment verification harness."""

    base_url: str = DEFAULT_BASE_URL
    project_dir: Path = Path(".")
    report_path: Path | None = None
    timeout: float = 30.0
    build_timeout: float = 60.0
    page_load_threshold_ms: int = 5000
    api_response_threshold_ms: int = 2000
    rate_limit_burst: int = 10
    required_env_vars: Sequence[str] = (
        "DATABASE_URL",
        "NEXTAUTH_URL",
        "NEXTAUTH_SECRET",
    )
    required_security_headers: Sequence[str] = (
        "x-frame-options",
        "x-content-type-options",
        "referrer-policy",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Self:
        """Build configuration from environment variables."""
        values: dict[str, str] = {}
        if base_url := environ.get("TEST_BASE_URL"):
            values["base_url"] = base_url
        if project_dir := environ.get("VERIFY_PROJECT_DIR"):
            values["project_dir"] = project_dir
        if report_path := environ.get("VERIFY_REPORT_PATH"):
            values["report_path"] = report_path
        return cls.model_validate(values)

    def url_for(self, path: str) -> str:
        """Join the base URL with an absolute path."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
