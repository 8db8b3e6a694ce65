"""CLI entry point for deployment verification."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Mapping

from deploy_verify.checks import DEFAULT_SUITES, VerificationContext
from deploy_verify.commands import CommandRunner, SubprocessCommandRunner
from deploy_verify.config import VerificationConfig
from deploy_verify.orchestrator import VerificationOrchestrator
from deploy_verify.probe import Probe, probe
from deploy_verify.report import exit_code, format_output, render_report
from deploy_verify.runner import TestRunner


async def run(
    config: VerificationConfig,
    *,
    commands: CommandRunner | None = None,
    http_probe: Probe | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run every check against the configured deployment and return exit code."""
    log = logging.getLogger("deploy_verify")

    log.info("Starting deployment verification against %s", config.base_url)
    context = VerificationContext(
        config=config,
        commands=commands or SubprocessCommandRunner(cwd=config.project_dir),
        probe=http_probe or probe,
        environ=environ if environ is not None else os.environ,
    )

    loop = asyncio.get_running_loop()
    started = loop.time()
    orchestrator = VerificationOrchestrator(runner=TestRunner(), suites=DEFAULT_SUITES)
    results = await orchestrator.run(context)
    log.info(
        "Deployment verification completed in %dms",
        round((loop.time() - started) * 1000),
    )

    print(render_report(results))

    if config.report_path is not None:
        config.report_path.write_text(json.dumps(format_output(results), indent=2))
        log.info("JSON report written to %s", config.report_path)

    return exit_code(results)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description=(
            "Verify a deployment: build, environment, database, API, security "
            "and performance checks. The target is read from TEST_BASE_URL."
        )
    )
    parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("deploy_verify")

    try:
        config = VerificationConfig.from_env(os.environ)
        code = asyncio.run(run(config))
    except Exception:
        log.exception("Deployment verification failed")
        code = 1
    sys.exit(code)


if __name__ == "__main__":  # pragma: no cover
    main()
