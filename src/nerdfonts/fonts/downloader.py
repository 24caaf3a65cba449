"""
Font Downloader
===============

Downloads font release archives over HTTP into a temporary file.
"""

import contextlib
import logging
import time
from pathlib import Path

import requests
from tqdm import tqdm

from nerdfonts.core.config import InstallerConfig
from nerdfonts.core.exceptions import (
    ArchiveWriteError,
    DownloadStatusError,
    DownloadTransportError,
)
from nerdfonts.core.models import FontEntry

logger = logging.getLogger(__name__)


class DownloadProgress:
    """Byte counting spinner for downloads of unknown length."""

    def __init__(self, description: str = "Downloading", enabled: bool = True):
        self.downloaded = 0
        self.start_time = time.time()
        self.pbar = tqdm(
            total=None,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            desc=description,
            leave=False,
            disable=not enabled,
        )

    def update(self, chunk_size: int):
        """Update progress."""
        self.downloaded += chunk_size
        self.pbar.update(chunk_size)

    def close(self):
        """Close progress bar."""
        self.pbar.close()

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        return time.time() - self.start_time


class FontDownloader:
    """Fetches font archives from the latest Nerd Fonts release."""

    def __init__(self, config: InstallerConfig | None = None):
        self.config = config or InstallerConfig()
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with appropriate configuration."""
        session = requests.Session()
        session.headers.update({"User-Agent": self.config.user_agent})
        return session

    def download_url(self, font: FontEntry) -> str:
        return self.config.asset_url(font.asset_name)

    def temp_path(self, font: FontEntry) -> Path:
        return self.config.temp_dir / font.asset_name

    def download(self, font: FontEntry) -> Path:
        """
        Download a font archive to the temporary directory.

        Args:
            font: Catalog entry to fetch

        Returns:
            Path of the downloaded archive

        Raises:
            DownloadError: On transport failure or non-success HTTP status
            ArchiveWriteError: If the archive cannot be written
        """
        url = self.download_url(font)
        target_path = self.temp_path(font)
        logger.info(f"Downloading {font.name} from {url}")

        try:
            response = self.session.get(url, stream=True, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            raise DownloadTransportError(url, str(e)) from e

        with response:
            if not response.ok:
                raise DownloadStatusError(url, response.status_code)

            progress = DownloadProgress(f"Downloading {font.name}", self.config.show_progress)
            try:
                self._write_body(response, target_path, progress)
            finally:
                progress.close()

        logger.info(
            f"Download completed: {progress.downloaded} bytes in {progress.elapsed_time:.2f}s"
        )
        return target_path

    def _write_body(
        self, response: requests.Response, target_path: Path, progress: DownloadProgress
    ) -> None:
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            with target_path.open("wb") as f:
                for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                    if chunk:
                        f.write(chunk)
                        progress.update(len(chunk))
        except (requests.RequestException, OSError) as e:
            with contextlib.suppress(OSError):
                target_path.unlink()
            if isinstance(e, requests.RequestException):
                raise DownloadTransportError(response.url or str(target_path), str(e)) from e
            raise ArchiveWriteError(str(target_path), str(e)) from e

    def close(self):
        """Cleanup downloader resources."""
        self.session.close()
