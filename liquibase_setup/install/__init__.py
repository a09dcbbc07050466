"""
Liquibase installation flow.

Usage:
    from liquibase_setup.install import Installer, InstallRequest, Edition

    result = Installer().install(InstallRequest("4.32.0", Edition.OSS))
"""

from .models import (
    Edition,
    InstallRequest,
    InstallResult,
    InstallationLocation,
    ResolvedVersion,
    ToolIdentity,
)
from .validation import (
    MIN_SUPPORTED_VERSION,
    validate_version,
    check_license_requirement,
)
from .urls import UrlResolver, resolve_download_url
from .configurator import configure_license
from .verifier import InstallationVerifier, locate_installation
from .installer import Installer, setup_liquibase

__all__ = [
    "Edition",
    "InstallRequest",
    "InstallResult",
    "InstallationLocation",
    "ResolvedVersion",
    "ToolIdentity",
    "MIN_SUPPORTED_VERSION",
    "validate_version",
    "check_license_requirement",
    "UrlResolver",
    "resolve_download_url",
    "configure_license",
    "InstallationVerifier",
    "locate_installation",
    "Installer",
    "setup_liquibase",
]
