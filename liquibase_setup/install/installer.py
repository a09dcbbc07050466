"""
Liquibase installation orchestration.

The Installer runs one strictly sequential flow per request:

1. Validate the version and the edition's license requirement
2. Resolve the exact version to install
3. Look the version up in the tool cache
4. On a miss (or with caching disabled) download and extract the archive,
   then store it in the cache when caching is enabled
5. Add the installation directory to the search path
6. Write the Pro license configuration
7. Run the installed executable to confirm it works

Any failure aborts the run; nothing is retried and no partial result is
returned.
"""

import logging
from pathlib import Path
from typing import Optional

from liquibase_setup.core.acquisition import HttpArchiveAcquirer
from liquibase_setup.core.exceptions import AcquisitionFailed
from liquibase_setup.core.interfaces import (
    ArchiveAcquirer,
    ProcessRunner,
    SearchPath,
    ToolCache,
)
from liquibase_setup.core.platform import PlatformInfo, detect_platform
from liquibase_setup.core.runner import RunnerEnvironment, SubprocessRunner
from liquibase_setup.core.tool_cache import LocalToolCache
from liquibase_setup.install.configurator import configure_license
from liquibase_setup.install.models import (
    Edition,
    InstallRequest,
    InstallResult,
    ResolvedVersion,
    ToolIdentity,
)
from liquibase_setup.install.urls import UrlResolver
from liquibase_setup.install.validation import (
    check_license_requirement,
    validate_version,
)
from liquibase_setup.install.verifier import InstallationVerifier, locate_installation

logger = logging.getLogger(__name__)


class Installer:
    """
    Installs Liquibase and publishes it on the search path.

    Example:
        >>> installer = Installer()
        >>> result = installer.install(InstallRequest("4.32.0", Edition.OSS))
        >>> print(f"Installed at: {result.path}")
    """

    def __init__(
        self,
        cache: Optional[ToolCache] = None,
        acquirer: Optional[ArchiveAcquirer] = None,
        search_path: Optional[SearchPath] = None,
        runner: Optional[ProcessRunner] = None,
        platform: Optional[PlatformInfo] = None,
        url_resolver: Optional[UrlResolver] = None,
    ):
        """
        Initialize installer.

        Args:
            cache: Tool cache (default: LocalToolCache)
            acquirer: Download/extract collaborator (default: HttpArchiveAcquirer)
            search_path: Search path collaborator (default: RunnerEnvironment)
            runner: Process runner used for validation (default: SubprocessRunner)
            platform: Host platform (default: detected)
            url_resolver: Download URL table (default: official URLs)
        """
        self.platform = platform or detect_platform()
        self.cache = cache or LocalToolCache(arch=self.platform.arch)
        self.acquirer = acquirer or HttpArchiveAcquirer()
        self.search_path = search_path or RunnerEnvironment()
        self.url_resolver = url_resolver or UrlResolver()
        self.verifier = InstallationVerifier(
            runner=runner or SubprocessRunner(), platform=self.platform
        )

    def install(self, request: InstallRequest) -> InstallResult:
        """
        Install the requested Liquibase version and edition.

        Raises:
            InvalidVersionFormat: If the version is not a semantic version
            UnsupportedVersion: If the version is below the supported minimum
            MissingLicenseKey: If Pro is requested without a license key
            AcquisitionFailed: If download or extraction fails
            InstallationValidationFailed: If the installed executable does not run
        """
        edition = Edition.parse(request.edition)

        validate_version(request.version)
        check_license_requirement(edition, request.license_key)

        # Requests name exact versions, so resolution is the identity
        resolved = ResolvedVersion(request.version)
        identity = ToolIdentity.for_edition(edition)

        install_dir = self.cache.find(identity.name, resolved.value)

        if install_dir is None or not request.use_cache:
            logger.info(f"Installing Liquibase {edition.value} version {resolved}")
            install_dir = self._acquire(resolved, edition)

            if request.use_cache:
                install_dir = self.cache.store(install_dir, identity.name, resolved.value)
        else:
            logger.info(f"Found cached Liquibase {edition.value} version {resolved}")

        location = locate_installation(install_dir)

        self.search_path.add_to_search_path(location.path)

        if edition is Edition.PRO:
            configure_license(location.path, request.license_key)

        self.verifier.verify(location)

        return InstallResult(version=resolved.value, path=location.path)

    def _acquire(self, version: ResolvedVersion, edition: Edition) -> Path:
        """
        Download and extract the distribution archive.

        Raises:
            AcquisitionFailed: Wrapping the download or extraction error
        """
        url = self.url_resolver.resolve(version.value, edition, self.platform)
        logger.info(f"Downloading Liquibase from {url}")

        try:
            archive = self.acquirer.download(url)
            if self.platform.is_windows:
                extracted = self.acquirer.extract_zip(archive)
            else:
                extracted = self.acquirer.extract_tar_gz(archive)
        except Exception as e:
            logger.error(f"Download/extraction failed: {e}")
            raise AcquisitionFailed(url, e) from e

        logger.debug(f"Extracted Liquibase to {extracted}")
        return Path(extracted)


def setup_liquibase(
    version: str,
    edition: str = "oss",
    license_key: Optional[str] = None,
    cache: bool = True,
) -> InstallResult:
    """
    Convenience function to install Liquibase with default collaborators.

    Example:
        >>> from liquibase_setup.install.installer import setup_liquibase
        >>> result = setup_liquibase("4.32.0", "oss")
        >>> print(result.path)
    """
    request = InstallRequest(
        version=version,
        edition=Edition.parse(edition),
        license_key=license_key,
        use_cache=cache,
    )
    return Installer().install(request)
