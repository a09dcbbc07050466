"""
Value types of the install flow.

Everything here is created fresh for one invocation and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from liquibase_setup.core.exceptions import InvalidEditionError

TOOL_NAME_PREFIX = "liquibase"


class Edition(str, Enum):
    """Liquibase product edition."""

    OSS = "oss"
    PRO = "pro"

    @classmethod
    def parse(cls, value) -> "Edition":
        """
        Parse an edition name, case-insensitively.

        Raises:
            InvalidEditionError: If value names no edition
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidEditionError(str(value)) from None


@dataclass
class InstallRequest:
    """
    What to install.

    A PRO request must carry a non-blank license_key; the installer checks
    this before doing any work.
    """

    version: str
    edition: Edition = Edition.OSS
    license_key: Optional[str] = None
    use_cache: bool = True

    def __repr__(self) -> str:
        key = "***" if self.license_key else None
        # Edition.parse runs in the installer, so edition may still be a plain string
        edition = getattr(self.edition, "value", self.edition)
        return (
            f"InstallRequest(version={self.version!r}, edition={edition!r}, "
            f"license_key={key!r}, use_cache={self.use_cache!r})"
        )


@dataclass(frozen=True)
class ResolvedVersion:
    """Exact version used for download and cache lookup."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ToolIdentity:
    """Cache key of an installation; editions never share entries."""

    name: str

    @classmethod
    def for_edition(cls, edition: Edition) -> "ToolIdentity":
        return cls(f"{TOOL_NAME_PREFIX}-{edition.value}")


@dataclass(frozen=True)
class InstallationLocation:
    """Installation directory and the executable inside it."""

    path: Path
    binary_path: Path


@dataclass(frozen=True)
class InstallResult:
    """Result of a successful installation."""

    version: str
    """The version that was installed"""

    path: Path
    """Directory Liquibase was installed to"""
