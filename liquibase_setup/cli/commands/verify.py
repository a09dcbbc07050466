"""
Verify command implementation.

Checks that an existing installation directory holds a runnable Liquibase.
"""

import logging

from liquibase_setup.core.runner import RunnerEnvironment
from liquibase_setup.install.verifier import InstallationVerifier, locate_installation

logger = logging.getLogger(__name__)


def run(args, environment: RunnerEnvironment) -> int:
    """
    Run the verify command.

    Returns:
        Exit code (0 for success)
    """
    location = locate_installation(args.path.resolve())
    logger.debug(f"Verifying installation at {location.path}")

    InstallationVerifier().verify(location)
    return 0
