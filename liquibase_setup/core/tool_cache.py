"""
On-disk tool cache shared by every job on a runner.

Layout mirrors the hosted runner tool cache so entries written here are found
by other tooling and vice versa:

    <root>/<tool>/<version>/<arch>/          installation
    <root>/<tool>/<version>/<arch>.complete  written last; entries without it are ignored
    <root>/<tool>/<version>/<arch>.lock      per-entry write lock

Concurrent writers of the same entry are serialized with a file lock, and an
entry only becomes visible to find() once its copy has completed.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import semantic_version
from filelock import FileLock, Timeout

from liquibase_setup.core.directory import get_tool_cache_dir
from liquibase_setup.core.exceptions import CacheError, CacheLockTimeout
from liquibase_setup.core.filesystem import recursive_copy, safe_rmtree
from liquibase_setup.core.interfaces import ToolCache
from liquibase_setup.core.platform import detect_platform

logger = logging.getLogger(__name__)


class LocalToolCache(ToolCache):
    """
    Tool cache rooted at a local directory.

    Example:
        >>> cache = LocalToolCache()
        >>> cache.find("liquibase-oss", "4.32.0")
        >>> cache.store(Path("/tmp/extracted"), "liquibase-oss", "4.32.0")
        PosixPath('/opt/hostedtoolcache/liquibase-oss/4.32.0/x64')
    """

    def __init__(
        self,
        root: Optional[Path] = None,
        arch: Optional[str] = None,
        lock_timeout: int = 300,
    ):
        """
        Initialize tool cache.

        Args:
            root: Cache root (default: RUNNER_TOOL_CACHE or ~/.liquibase-setup/tool-cache)
            arch: Architecture segment of entries (default: detected host arch)
            lock_timeout: Seconds to wait for a concurrent writer of the same entry
        """
        self.root = Path(root) if root else get_tool_cache_dir()
        self.arch = arch or detect_platform().arch
        self.lock_timeout = lock_timeout

        logger.debug(f"Initialized tool cache at {self.root}")

    def entry_dir(self, tool_name: str, version: str) -> Path:
        """Directory an entry for (tool_name, version) lives in."""
        if not tool_name:
            raise CacheError("Tool name cannot be empty")
        if not version:
            raise CacheError("Version cannot be empty")
        return self.root / tool_name / _clean_version(version) / self.arch

    def _marker(self, entry: Path) -> Path:
        return entry.parent / f"{entry.name}.complete"

    def find(self, tool_name: str, version: str) -> Optional[Path]:
        entry = self.entry_dir(tool_name, version)

        if entry.is_dir() and self._marker(entry).exists():
            logger.debug(f"Cache hit: {entry}")
            return entry

        logger.debug(f"Cache miss: {tool_name} {version}")
        return None

    def store(self, source_dir: Path, tool_name: str, version: str) -> Path:
        entry = self.entry_dir(tool_name, version)
        marker = self._marker(entry)

        with self._lock(entry):
            # Invalidate before touching contents so readers never see a half copy
            marker.unlink(missing_ok=True)
            if entry.exists():
                safe_rmtree(entry, require_prefix=self.root)

            logger.debug(f"Caching {source_dir} as {entry}")
            recursive_copy(source_dir, entry)
            marker.write_text("", encoding="utf-8")

        logger.info(f"Cached {tool_name} {version} at {entry}")
        return entry

    @contextmanager
    def _lock(self, entry: Path):
        """
        Hold the write lock of an entry.

        Raises:
            CacheLockTimeout: If the lock cannot be acquired within timeout
        """
        entry.parent.mkdir(parents=True, exist_ok=True)
        lock_path = entry.parent / f"{entry.name}.lock"
        lock = FileLock(lock_path, timeout=self.lock_timeout)

        try:
            with lock:
                logger.debug(f"Acquired cache lock: {lock_path}")
                yield
            logger.debug(f"Released cache lock: {lock_path}")
        except Timeout as e:
            raise CacheLockTimeout(
                f"Could not acquire cache lock {lock_path} within {self.lock_timeout} "
                "seconds. Another process may be caching the same version."
            ) from e


def _clean_version(version: str) -> str:
    """Normalize a version for use as a path segment (drops a leading 'v')."""
    candidate = version.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    try:
        return str(semantic_version.Version(candidate))
    except ValueError:
        return candidate


__all__ = ["LocalToolCache"]
