"""
Request validation performed before any network or filesystem activity.
"""

from typing import Optional

import semantic_version

from liquibase_setup.core.exceptions import (
    InvalidVersionFormat,
    MissingLicenseKey,
    UnsupportedVersion,
)
from liquibase_setup.install.models import Edition

MIN_SUPPORTED_VERSION = "4.32.0"


def validate_version(version: str, minimum: str = MIN_SUPPORTED_VERSION) -> str:
    """
    Check that version is a semantic version no older than minimum.

    Args:
        version: Requested version (MAJOR.MINOR.PATCH[-prerelease][+build])
        minimum: Oldest supported version

    Returns:
        version, unchanged

    Raises:
        InvalidVersionFormat: If version does not parse as a semantic version
        UnsupportedVersion: If version is strictly lower than minimum

    Example:
        >>> validate_version("4.32.0")
        '4.32.0'
        >>> validate_version("4.20.0")
        Traceback (most recent call last):
        ...
        UnsupportedVersion: Version 4.20.0 is not supported. Minimum supported version is 4.32.0
    """
    if not isinstance(version, str):
        raise InvalidVersionFormat(str(version))

    try:
        parsed = semantic_version.Version(version)
    except ValueError:
        raise InvalidVersionFormat(version) from None

    if parsed < semantic_version.Version(minimum):
        raise UnsupportedVersion(version, minimum)

    return version


def check_license_requirement(edition: Edition, license_key: Optional[str]) -> None:
    """
    Require a license key for the Pro edition.

    Raises:
        MissingLicenseKey: If edition is PRO and license_key is missing or blank
    """
    if edition is Edition.PRO and (license_key is None or not license_key.strip()):
        raise MissingLicenseKey()
