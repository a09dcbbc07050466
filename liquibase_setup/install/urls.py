"""
Download URL resolution.

Resolution is local string substitution over a fixed template table keyed by
edition and platform family; nothing here touches the network.
"""

import logging
from typing import Dict, Mapping, Optional, Tuple

from liquibase_setup.core.exceptions import ConfigurationError
from liquibase_setup.core.platform import PlatformInfo, detect_platform
from liquibase_setup.install.models import Edition

logger = logging.getLogger(__name__)

VERSION_PLACEHOLDER = "{version}"

UNIX = "unix"
WINDOWS = "windows"

DOWNLOAD_URLS: Dict[Tuple[Edition, str], str] = {
    (Edition.OSS, UNIX): (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/download/"
        "v{version}/liquibase-{version}.tar.gz"
    ),
    (Edition.OSS, WINDOWS): (
        "https://package.liquibase.com/downloads/cli/liquibase/releases/download/"
        "v{version}/liquibase-{version}.zip"
    ),
    (Edition.PRO, UNIX): (
        "https://repo.liquibase.com/releases/pro/{version}/liquibase-pro-{version}.tar.gz"
    ),
    (Edition.PRO, WINDOWS): (
        "https://repo.liquibase.com/releases/pro/{version}/liquibase-pro-{version}.zip"
    ),
}

# Names used for template overrides in configuration files
TEMPLATE_KEYS: Dict[str, Tuple[Edition, str]] = {
    "oss_unix": (Edition.OSS, UNIX),
    "oss_windows": (Edition.OSS, WINDOWS),
    "pro_unix": (Edition.PRO, UNIX),
    "pro_windows": (Edition.PRO, WINDOWS),
}


def platform_family(platform: PlatformInfo) -> str:
    return WINDOWS if platform.is_windows else UNIX


class UrlResolver:
    """
    Maps (version, edition, platform) to a download URL.

    Example:
        >>> resolver = UrlResolver()
        >>> resolver.resolve("4.32.0", Edition.OSS, PlatformInfo("linux", "x64"))
        'https://package.liquibase.com/downloads/cli/liquibase/releases/download/v4.32.0/liquibase-4.32.0.tar.gz'
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None):
        """
        Initialize resolver.

        Args:
            overrides: Optional template overrides keyed by 'oss_unix',
                'oss_windows', 'pro_unix' or 'pro_windows' (e.g., for a mirror)

        Raises:
            ConfigurationError: If an override key is unknown or a template
                lacks the {version} placeholder
        """
        self.templates = dict(DOWNLOAD_URLS)

        for key, template in (overrides or {}).items():
            if key not in TEMPLATE_KEYS:
                raise ConfigurationError(
                    f"Unknown download URL key: {key}. "
                    f"Expected one of: {', '.join(TEMPLATE_KEYS)}"
                )
            if not isinstance(template, str) or VERSION_PLACEHOLDER not in template:
                raise ConfigurationError(
                    f"Download URL template for {key} must contain {VERSION_PLACEHOLDER}"
                )
            logger.debug(f"Using download URL override for {key}: {template}")
            self.templates[TEMPLATE_KEYS[key]] = template

    def resolve(
        self, version: str, edition: Edition, platform: Optional[PlatformInfo] = None
    ) -> str:
        platform = platform or detect_platform()
        template = self.templates[(edition, platform_family(platform))]
        return template.replace(VERSION_PLACEHOLDER, version)


def resolve_download_url(
    version: str, edition: Edition, platform: Optional[PlatformInfo] = None
) -> str:
    """Resolve a download URL from the default template table."""
    return UrlResolver().resolve(version, edition, platform)
