"""Command-line entrypoint run as a CI step."""

import asyncio
import sys

import structlog
from pydantic import ValidationError

from translation_guard.core.application.ports.ci_port import CiPort
from translation_guard.core.exceptions import ProviderError, SetupError
from translation_guard.infrastructure.configuration.main_settings import Settings
from translation_guard.infrastructure.drivers.github.github_actions_reporter import (
    GitHubActionsReporter,
)
from translation_guard.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from translation_guard.infrastructure.resolution.container import build_vcs, build_workflow

logger = get_logger(__name__)

FAILURE_MESSAGE = "Translation check failed"


async def run_check(settings: Settings, reporter: CiPort) -> int:
    """Run the whole check and report through reporter. Returns the exit code."""
    try:
        settings.validate_credentials()
        config = settings.to_check_config()
        commit = settings.to_commit_context()
        structlog.contextvars.bind_contextvars(repository=commit.repository, sha=commit.sha)
        vcs = build_vcs(settings)
        try:
            files = await vcs.get_changed_files(commit.repository, commit.sha)
        except ProviderError as exc:
            raise SetupError(f"Could not read commit {commit.sha}: {exc}") from exc
        report = await build_workflow(settings, vcs, commit).run(files, config)
    except SetupError as exc:
        logger.error(
            "Translation check aborted", error_type=type(exc).__name__, error_details=str(exc)
        )
        reporter.set_failed(f"Action failed: {exc}")
        return 1

    if report.has_errors:
        failed_files = [result.filename for result in report.file_results if result.has_errors]
        logger.error(FAILURE_MESSAGE, failed_files=failed_files)
        reporter.set_failed(FAILURE_MESSAGE)
        return 1

    if report.files_processed:
        logger.info("All translation files verified successfully!", files=report.files_processed)
    reporter.set_output("status", "success")
    return 0


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        GitHubActionsReporter().set_failed(f"Action failed: {exc}")
        sys.exit(1)

    configure_logging(settings.log_level)
    reporter = GitHubActionsReporter(settings.github_output)
    sys.exit(asyncio.run(run_check(settings, reporter)))
