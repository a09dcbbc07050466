"""
Centralized exception hierarchy for liquibase-setup.

Every failure raised by the install flow derives from LiquibaseSetupError so
callers can fail the pipeline step with a single except clause and print the
message verbatim.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class LiquibaseSetupError(Exception):
    """Base exception for all liquibase-setup errors."""

    pass


class ConfigurationError(LiquibaseSetupError):
    """Invalid configuration file or runner input."""

    pass


# ============================================================================
# Install Flow Exceptions
# ============================================================================


class InstallError(LiquibaseSetupError):
    """Base exception for installation errors."""

    pass


class InvalidVersionFormat(InstallError):
    """Raised when the requested version is not a semantic version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"Invalid version format: {version}. "
            'Must be a valid semantic version (e.g., "4.32.0")'
        )


class UnsupportedVersion(InstallError):
    """Raised when the requested version is below the supported minimum."""

    def __init__(self, version: str, minimum: str):
        self.version = version
        self.minimum = minimum
        super().__init__(
            f"Version {version} is not supported. "
            f"Minimum supported version is {minimum}"
        )


class InvalidEditionError(InstallError):
    """Raised when an unknown edition is requested."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid edition: {value!r}. Must be 'oss' or 'pro'")


class MissingLicenseKey(InstallError):
    """Raised when the Pro edition is requested without a license key."""

    def __init__(self):
        super().__init__("License key is required for Liquibase Pro edition")


class AcquisitionFailed(InstallError):
    """Download or extraction of the distribution archive failed."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to download or extract Liquibase from {url}: {cause}")


class InstallationValidationFailed(InstallError):
    """The installed executable could not be run."""

    def __init__(self, executable: str, cause: Optional[BaseException] = None):
        self.executable = executable
        self.cause = cause
        super().__init__(
            f"Failed to validate Liquibase installation ({executable}): {cause}"
        )


# ============================================================================
# Cache Exceptions
# ============================================================================


class CacheError(LiquibaseSetupError):
    """Base exception for tool cache errors."""

    pass


class CacheLockTimeout(CacheError):
    """Raised when a cache entry lock cannot be acquired within timeout."""

    pass
