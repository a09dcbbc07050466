"""
Default archive acquirer: HTTP download plus local extraction.

Every download and extraction gets a fresh uuid-named path under the temp
directory, so concurrent jobs sharing a runner never collide.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from liquibase_setup.core.directory import get_temp_dir
from liquibase_setup.core.download import DownloadProgress, download_file
from liquibase_setup.core.filesystem import extract_tar_gz, extract_zip
from liquibase_setup.core.interfaces import ArchiveAcquirer

logger = logging.getLogger(__name__)


class HttpArchiveAcquirer(ArchiveAcquirer):
    """
    Downloads archives with requests and extracts them with zipfile/tarfile.

    Example:
        >>> acquirer = HttpArchiveAcquirer()
        >>> archive = acquirer.download("https://example.com/liquibase-4.32.0.tar.gz")
        >>> directory = acquirer.extract_tar_gz(archive)
    """

    def __init__(self, temp_dir: Optional[Path] = None, timeout: int = 30):
        """
        Initialize acquirer.

        Args:
            temp_dir: Scratch directory. If None, uses RUNNER_TEMP or system temp.
            timeout: Request timeout in seconds
        """
        self.temp_dir = Path(temp_dir) if temp_dir else get_temp_dir()
        self.timeout = timeout

    def download(self, url: str) -> Path:
        destination = self.temp_dir / str(uuid.uuid4())
        logger.debug(f"Downloading {url} to {destination}")
        return download_file(
            url,
            destination,
            progress_callback=self._log_progress,
            timeout=self.timeout,
        )

    def extract_zip(self, archive: Path) -> Path:
        destination = self.temp_dir / str(uuid.uuid4())
        logger.debug(f"Extracting zip {archive} to {destination}")
        return extract_zip(archive, destination)

    def extract_tar_gz(self, archive: Path) -> Path:
        destination = self.temp_dir / str(uuid.uuid4())
        logger.debug(f"Extracting tar.gz {archive} to {destination}")
        return extract_tar_gz(archive, destination)

    @staticmethod
    def _log_progress(progress: DownloadProgress) -> None:
        logger.debug(f"Downloaded {progress}")
