"""
Post-install check that the installed executable runs.
"""

import logging
from pathlib import Path
from typing import Optional

from liquibase_setup.core.exceptions import InstallationValidationFailed
from liquibase_setup.core.interfaces import ProcessRunner
from liquibase_setup.core.platform import PlatformInfo, detect_platform
from liquibase_setup.core.runner import SubprocessRunner
from liquibase_setup.install.models import InstallationLocation

logger = logging.getLogger(__name__)

EXECUTABLE_NAME = "liquibase"
VERSION_FLAG = "--version"


def locate_installation(install_dir: Path) -> InstallationLocation:
    """Build the location record for an installation directory."""
    install_dir = Path(install_dir)
    return InstallationLocation(
        path=install_dir, binary_path=install_dir / EXECUTABLE_NAME
    )


class InstallationVerifier:
    """
    Runs `liquibase --version` against an installation.

    On Windows the batch wrapper liquibase.bat is invoked instead of the
    extensionless launcher.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        platform: Optional[PlatformInfo] = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.platform = platform or detect_platform()

    def executable_for(self, location: InstallationLocation) -> str:
        binary = str(location.binary_path)
        return f"{binary}.bat" if self.platform.is_windows else binary

    def verify(self, location: InstallationLocation) -> None:
        """
        Raises:
            InstallationValidationFailed: If the executable cannot be spawned
                or exits with a non-zero status
        """
        executable = self.executable_for(location)

        try:
            exit_code = self.runner.run(executable, [VERSION_FLAG], suppress_output=True)
        except OSError as e:
            raise InstallationValidationFailed(executable, e) from e

        if exit_code != 0:
            raise InstallationValidationFailed(
                executable,
                RuntimeError(f"{executable} {VERSION_FLAG} exited with code {exit_code}"),
            )

        logger.info("Liquibase installation validated successfully")
