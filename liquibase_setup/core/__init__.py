"""
Core functionality for liquibase-setup.

This package contains the collaborator contracts and their default
implementations that the install flow depends on.
"""

from .exceptions import (
    LiquibaseSetupError,
    ConfigurationError,
    InstallError,
    InvalidVersionFormat,
    UnsupportedVersion,
    InvalidEditionError,
    MissingLicenseKey,
    AcquisitionFailed,
    InstallationValidationFailed,
    CacheError,
    CacheLockTimeout,
)

from .interfaces import (
    ToolCache,
    ArchiveAcquirer,
    SearchPath,
    ProcessRunner,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .acquisition import HttpArchiveAcquirer
from .runner import RunnerEnvironment, SubprocessRunner
from .tool_cache import LocalToolCache

__all__ = [
    # Exceptions
    "LiquibaseSetupError",
    "ConfigurationError",
    "InstallError",
    "InvalidVersionFormat",
    "UnsupportedVersion",
    "InvalidEditionError",
    "MissingLicenseKey",
    "AcquisitionFailed",
    "InstallationValidationFailed",
    "CacheError",
    "CacheLockTimeout",
    # Interfaces
    "ToolCache",
    "ArchiveAcquirer",
    "SearchPath",
    "ProcessRunner",
    # Platform
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    # Default collaborators
    "HttpArchiveAcquirer",
    "RunnerEnvironment",
    "SubprocessRunner",
    "LocalToolCache",
]
