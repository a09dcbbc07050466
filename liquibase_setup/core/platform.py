"""
Platform detection for liquibase-setup.

The install flow never inspects the host directly. It receives a PlatformInfo
(normally from detect_platform()) so URL selection, archive format and the
validation command can be exercised for every platform from any host.

Usage:
    from liquibase_setup.core.platform import detect_platform

    platform_info = detect_platform()
    print(platform_info.platform_string())  # e.g. 'linux-x64'
"""

import functools
import platform
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformInfo:
    """
    Host platform description.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
    """

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        """True when Windows conventions apply (ZIP archives, .bat wrapper)."""
        return self.os == "windows"

    def platform_string(self) -> str:
        """
        Get canonical platform string.

        Example:
            >>> PlatformInfo('linux', 'x64').platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Raises:
        RuntimeError: If OS is not supported
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        raise RuntimeError(f"Unsupported operating system: {system}")


def _detect_architecture() -> str:
    """Detect CPU architecture, normalized to 'x64', 'arm64', 'x86' or 'arm'."""
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Unknown architectures pass through unchanged
        return machine


def clear_platform_cache() -> None:
    """Clear the cached detection result (used by tests)."""
    detect_platform.cache_clear()


__all__ = ["PlatformInfo", "detect_platform", "clear_platform_cache"]
