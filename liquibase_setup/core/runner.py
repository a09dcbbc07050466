"""
CI runner integration and process execution.

RunnerEnvironment speaks the GitHub Actions workflow-command protocol:
inputs arrive as INPUT_* environment variables, and path additions and step
outputs are appended to the files named by GITHUB_PATH and GITHUB_OUTPUT.
Outside a runner those files are absent and only the current process
environment is updated.
"""

import logging
import os
import subprocess
import uuid
from pathlib import Path
from typing import List, MutableMapping, Optional

from liquibase_setup.core.interfaces import ProcessRunner, SearchPath

logger = logging.getLogger(__name__)


class RunnerEnvironment(SearchPath):
    """
    Environment of the current runner session.

    Args:
        environ: Environment mapping to read and mutate (default: os.environ)
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @property
    def is_github_actions(self) -> bool:
        return self.environ.get("GITHUB_ACTIONS", "").lower() == "true"

    def get_input(self, name: str) -> str:
        """
        Read an action input, returning an empty string when unset.

        Example:
            >>> RunnerEnvironment({"INPUT_VERSION": " 4.32.0 "}).get_input("version")
            '4.32.0'
        """
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        return self.environ.get(key, "").strip()

    def add_to_search_path(self, directory: Path) -> None:
        directory = str(directory)

        path_file = self.environ.get("GITHUB_PATH")
        if path_file:
            with open(path_file, "a", encoding="utf-8") as f:
                f.write(f"{directory}\n")

        current = self.environ.get("PATH", "")
        self.environ["PATH"] = (
            f"{directory}{os.pathsep}{current}" if current else directory
        )
        logger.debug(f"Added {directory} to PATH")

    def set_output(self, name: str, value: str) -> None:
        """Publish a step output for later workflow steps."""
        output_file = self.environ.get("GITHUB_OUTPUT")
        if not output_file:
            logger.debug(f"No GITHUB_OUTPUT file, output {name}={value} not published")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n")
            f.write(f"{value}\n")
            f.write(f"{delimiter}\n")

    def mask_secret(self, secret: str) -> None:
        """Ask the runner to redact secret from all later log output."""
        if secret and self.is_github_actions:
            print(f"::add-mask::{secret}", flush=True)

    def report_error(self, message: str) -> None:
        """Emit an error annotation for the current step."""
        if self.is_github_actions:
            escaped = (
                message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
            )
            print(f"::error::{escaped}", flush=True)


class SubprocessRunner(ProcessRunner):
    """Runs processes with subprocess."""

    def __init__(self, timeout: Optional[int] = None):
        """
        Args:
            timeout: Optional limit in seconds for each process
        """
        self.timeout = timeout

    def run(
        self, executable: str, args: List[str], suppress_output: bool = True
    ) -> int:
        command = [executable, *args]
        logger.debug(f"Running: {' '.join(command)}")

        output = subprocess.DEVNULL if suppress_output else None
        try:
            result = subprocess.run(
                command,
                stdout=output,
                stderr=output,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise OSError(f"{executable} timed out after {self.timeout} seconds") from e

        return result.returncode


__all__ = ["RunnerEnvironment", "SubprocessRunner"]
