"""
File system utilities for liquibase-setup.

This module provides the file operations the installer relies on:
- Archive extraction (zip, tar.gz) with directory traversal protection
- Atomic writes for configuration files
- Safe directory removal and tree copies for the tool cache
"""

import os
import shutil
import sys
import tarfile
import tempfile
import zipfile
from pathlib import Path
from typing import Optional, Union

IS_WINDOWS = os.name == "nt"


# ============================================================================
# Error Handling
# ============================================================================


class FilesystemError(Exception):
    """Base exception for filesystem operations."""

    pass


class ArchiveExtractionError(FilesystemError):
    """Failed to extract an archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


# ============================================================================
# Archive Extraction
# ============================================================================


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not member_path.is_relative_to(destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_zip(archive_path: Union[str, Path], destination: Union[str, Path]) -> Path:
    """
    Extract a ZIP archive into destination.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to (created if missing)

    Returns:
        The destination directory

    Raises:
        ArchiveExtractionError: If the archive is missing or corrupt
        InsecureArchiveError: If the archive contains malicious paths
    """
    archive_path, destination = _prepare_extraction(archive_path, destination)

    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            members = zf.namelist()
            for member in members:
                _validate_archive_path(member, destination)
            zf.extractall(destination)
    except InsecureArchiveError:
        raise
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e

    return destination


def extract_tar_gz(
    archive_path: Union[str, Path], destination: Union[str, Path]
) -> Path:
    """
    Extract a gzip-compressed tar archive into destination.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to (created if missing)

    Returns:
        The destination directory

    Raises:
        ArchiveExtractionError: If the archive is missing or corrupt
        InsecureArchiveError: If the archive contains malicious paths
    """
    archive_path, destination = _prepare_extraction(archive_path, destination)

    try:
        with tarfile.open(archive_path, "r:gz") as tar:
            for member in tar.getmembers():
                _validate_archive_path(member.name, destination)

            # Extract with filter for security (Python 3.12+)
            # For older Python, paths were validated above
            if sys.version_info >= (3, 12):
                tar.extractall(destination, filter="data")
            else:
                tar.extractall(destination)
    except InsecureArchiveError:
        raise
    except (tarfile.TarError, OSError) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e

    return destination


def _prepare_extraction(
    archive_path: Union[str, Path], destination: Union[str, Path]
) -> tuple:
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)
    return archive_path, destination


# ============================================================================
# Safe File Operations
# ============================================================================


def atomic_write(
    file_path: Union[str, Path], content: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    The file is never observed in a partially-written state. If the write
    fails, the original file (if any) remains unchanged.

    Example:
        >>> atomic_write('liquibase.properties', 'liquibase.licenseKey=abc\\n')
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the same directory keeps the rename on one filesystem
    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        # newline="" keeps "\n" as-is on Windows so content is byte-identical
        if isinstance(content, str):
            with open(temp_fd, "w", encoding=encoding, newline="") as f:
                f.write(content)
        else:
            with open(temp_fd, "wb") as f:
                f.write(content)

        temp_path.replace(file_path)

    except Exception:
        temp_path.unlink(missing_ok=True)
        raise


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Safely remove a directory tree.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Raises:
        ValueError: If path is not under require_prefix
        FilesystemError: If deletion fails
    """
    path = Path(path).resolve()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).resolve()
        if not path.is_relative_to(require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return

    if not path.is_dir():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        if IS_WINDOWS:

            def handle_remove_readonly(func, path, exc):
                """Error handler for Windows read-only files."""
                if not os.access(path, os.W_OK):
                    os.chmod(path, 0o777)
                    func(path)
                else:
                    raise

            shutil.rmtree(path, onerror=handle_remove_readonly)
        else:
            shutil.rmtree(path)

    except Exception as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}") from e


def recursive_copy(source: Union[str, Path], destination: Union[str, Path]) -> None:
    """
    Recursively copy a directory tree, preserving file modes and symlinks.

    Raises:
        FilesystemError: If source is missing or not a directory
    """
    source = Path(source)
    destination = Path(destination)

    if not source.exists():
        raise FilesystemError(f"Source does not exist: {source}")

    if not source.is_dir():
        raise FilesystemError(f"Source is not a directory: {source}")

    shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)


__all__ = [
    "FilesystemError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "extract_zip",
    "extract_tar_gz",
    "atomic_write",
    "safe_rmtree",
    "recursive_copy",
]
