"""
Edition-specific post-install configuration.
"""

import logging
from pathlib import Path

from liquibase_setup.core.filesystem import atomic_write

logger = logging.getLogger(__name__)

PROPERTIES_FILENAME = "liquibase.properties"
LICENSE_KEY_PROPERTY = "liquibase.licenseKey"


def configure_license(install_dir: Path, license_key: str) -> Path:
    """
    Write the Pro license key into liquibase.properties in install_dir.

    Any existing file is replaced; the same key always yields the same bytes.

    Returns:
        Path of the written properties file
    """
    properties_path = Path(install_dir) / PROPERTIES_FILENAME
    atomic_write(properties_path, f"{LICENSE_KEY_PROPERTY}={license_key}\n")

    logger.info("Configured Liquibase Pro license key")
    return properties_path
