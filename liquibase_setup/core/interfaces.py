"""
Collaborator interfaces for the install flow.

The installer depends only on these abstract contracts. Default
implementations live in tool_cache, acquisition and runner; tests substitute
in-memory fakes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional


class ToolCache(ABC):
    """Persistent store of extracted tool installations keyed by name and version."""

    @abstractmethod
    def find(self, tool_name: str, version: str) -> Optional[Path]:
        """
        Look up a cached installation.

        Args:
            tool_name: Cache key of the tool (e.g., "liquibase-oss")
            version: Exact version string

        Returns:
            Directory of the cached installation, or None if not cached
        """
        pass

    @abstractmethod
    def store(self, source_dir: Path, tool_name: str, version: str) -> Path:
        """
        Persist an extracted installation.

        Args:
            source_dir: Directory holding the extracted tool
            tool_name: Cache key of the tool
            version: Exact version string

        Returns:
            Canonical cached location, which may differ from source_dir
        """
        pass


class ArchiveAcquirer(ABC):
    """Downloads distribution archives and unpacks them."""

    @abstractmethod
    def download(self, url: str) -> Path:
        """Download url to a transient local file and return its path."""
        pass

    @abstractmethod
    def extract_zip(self, archive: Path) -> Path:
        """Extract a ZIP archive into a fresh directory and return it."""
        pass

    @abstractmethod
    def extract_tar_gz(self, archive: Path) -> Path:
        """Extract a gzip tar archive into a fresh directory and return it."""
        pass


class SearchPath(ABC):
    """Executable search path shared with later steps of the runner session."""

    @abstractmethod
    def add_to_search_path(self, directory: Path) -> None:
        """Make executables in directory resolvable by name."""
        pass


class ProcessRunner(ABC):
    """Spawns processes."""

    @abstractmethod
    def run(
        self, executable: str, args: List[str], suppress_output: bool = True
    ) -> int:
        """
        Run executable with args and wait for it.

        Returns:
            Process exit code

        Raises:
            OSError: If the process cannot be spawned
        """
        pass


__all__ = ["ToolCache", "ArchiveAcquirer", "SearchPath", "ProcessRunner"]
