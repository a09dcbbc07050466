"""
Install command implementation.

Installs Liquibase, publishes it on PATH and exposes the installed version
and path as step outputs.
"""

import logging

from liquibase_setup.cli.config import resolve_settings
from liquibase_setup.core.runner import RunnerEnvironment
from liquibase_setup.install.installer import Installer
from liquibase_setup.install.urls import UrlResolver

logger = logging.getLogger(__name__)


def run(args, environment: RunnerEnvironment) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments
        environment: Runner environment for inputs, outputs and PATH

    Returns:
        Exit code (0 for success)
    """
    settings = resolve_settings(
        config_file=args.config,
        environment=environment,
        version=args.liquibase_version,
        edition=args.edition,
        cache=args.cache,
    )

    if settings.license_key:
        environment.mask_secret(settings.license_key)

    request = settings.to_request()
    logger.debug(f"Install request: {request!r}")

    installer = Installer(
        search_path=environment,
        url_resolver=UrlResolver(settings.download_urls),
    )
    result = installer.install(request)

    environment.set_output("liquibase-version", result.version)
    environment.set_output("liquibase-path", str(result.path))

    logger.info(
        f"Liquibase {request.edition.value} {result.version} is installed at {result.path}"
    )
    return 0
