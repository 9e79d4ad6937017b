"""GitHub Actions workflow commands: step outputs and failure annotations."""

import sys
from pathlib import Path
from typing import TextIO

from translation_guard.core.application.ports.ci_port import CiPort
from translation_guard.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


def escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsReporter(CiPort):
    def __init__(self, output_path: Path | None = None, stream: TextIO | None = None) -> None:
        self._output_path = output_path
        self._stream = stream or sys.stdout
        self.failed = False

    def set_output(self, name: str, value: str) -> None:
        if self._output_path is None:
            logger.info("No GITHUB_OUTPUT file, output not published", output=name, value=value)
            return
        with self._output_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{name}={value}\n")

    def set_failed(self, message: str) -> None:
        self.failed = True
        self._stream.write(f"::error::{escape_command_data(message)}\n")
        self._stream.flush()
