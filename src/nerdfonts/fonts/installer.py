"""
Font Installer
==============

Download, extract and install pipeline for catalog fonts. Each font is
handled on its own: download the release archive to the temporary
directory, copy the font files it contains into the user font directory,
then remove the archive.

There is no rollback. Files written before a failure stay on disk.
"""

import contextlib
import logging
import zipfile
import zlib
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePosixPath

from nerdfonts.core.config import InstallerConfig
from nerdfonts.core.exceptions import (
    ArchiveError,
    FontDirectoryCreationError,
    InstallerError,
    InvalidArchiveError,
)
from nerdfonts.core.models import FontEntry, FontInstallResult, InstallReport

from .downloader import FontDownloader
from .platform import Platform, detect_platform, resolve_font_dir

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf")


def safe_member_name(name: str) -> str | None:
    """
    Get the file name of an archive member, refusing unsafe paths.

    Returns None for absolute paths, drive letters, parent directory
    references, NUL bytes and names without a final component.
    """
    if "\x00" in name:
        return None

    normalized = name.replace("\\", "/")
    path = PurePosixPath(normalized)
    if path.is_absolute() or (path.parts and path.parts[0].endswith(":")):
        return None
    if ".." in path.parts:
        return None
    if normalized.endswith("/") or not path.name:
        return None
    return path.name


def extract_fonts(
    archive_path: Path, target_dir: Path, extensions: Sequence[str] = FONT_EXTENSIONS
) -> list[Path]:
    """
    Extract font files from a zip archive into a flat directory.

    Members are written under their base name, overwriting existing files.
    Directories and members with other suffixes (case-sensitive match) are
    skipped.

    Args:
        archive_path: Zip archive to read
        target_dir: Existing directory receiving the fonts
        extensions: Accepted file suffixes

    Returns:
        Paths of the files written, in archive order

    Raises:
        ArchiveError: If the archive cannot be opened or a member cannot be read
    """
    suffixes = tuple(extensions)
    written = []

    try:
        archive = zipfile.ZipFile(archive_path)
    except (zipfile.BadZipFile, OSError) as e:
        raise InvalidArchiveError(str(archive_path), str(e)) from e

    with archive:
        for info in archive.infolist():
            if info.is_dir():
                continue

            file_name = safe_member_name(info.filename)
            if file_name is None:
                logger.debug(f"Skipping unsafe archive member: {info.filename!r}")
                continue
            if not file_name.endswith(suffixes):
                logger.debug(f"Skipping non-font member: {info.filename}")
                continue

            out_path = target_dir / file_name
            try:
                with archive.open(info) as src, out_path.open("wb") as dst:
                    while chunk := src.read(1024 * 1024):
                        dst.write(chunk)
            except (
                zipfile.BadZipFile,
                zipfile.LargeZipFile,
                zlib.error,
                EOFError,
                NotImplementedError,
                RuntimeError,
                OSError,
            ) as e:
                raise ArchiveError(f"Failed to extract {info.filename}: {e}") from e

            logger.debug(f"Installed {out_path}")
            written.append(out_path)

    return written


class InstallProgressCallback:
    """Base class for install progress callbacks."""

    def on_start(self, total_fonts: int) -> None:
        """Called before the first font is installed."""

    def on_font_start(self, font: FontEntry, index: int, total_fonts: int) -> None:
        """Called when installation of a font starts."""

    def on_font_complete(self, result: FontInstallResult) -> None:
        """Called when installation of a font finishes, successfully or not."""

    def on_complete(self, report: InstallReport) -> None:
        """Called when all fonts have been attempted."""


class FontInstaller:
    """
    Installs catalog fonts into the user font directory.

    Fonts are processed one at a time and a failure of one font does not
    stop the others.
    """

    def __init__(
        self,
        config: InstallerConfig | None = None,
        platform: Platform | None = None,
        downloader: FontDownloader | None = None,
    ):
        self.config = config or InstallerConfig()
        self.platform = platform or detect_platform()
        self.downloader = downloader or FontDownloader(self.config)

    def get_install_dir(self) -> Path:
        """Resolve the target directory without creating it."""
        if self.config.font_dir is not None:
            return self.config.font_dir
        return resolve_font_dir(self.platform)

    def _prepare_install_dir(self) -> Path:
        font_dir = self.get_install_dir()
        try:
            font_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FontDirectoryCreationError(str(font_dir), str(e)) from e
        return font_dir

    def install(self, font: FontEntry) -> FontInstallResult:
        """
        Download and install a single font.

        Args:
            font: Catalog entry to install

        Returns:
            Successful FontInstallResult

        Raises:
            InstallerError: If any pipeline step fails
        """
        archive_path = self.downloader.download(font)
        try:
            font_dir = self._prepare_install_dir()
            installed = extract_fonts(archive_path, font_dir, self.config.font_extensions)
        finally:
            with contextlib.suppress(OSError):
                archive_path.unlink()

        if not installed:
            logger.warning(f"No font files found in {font.asset_name}")
        logger.info(f"Installed {len(installed)} files for {font.name} to {font_dir}")
        return FontInstallResult(
            font=font, success=True, installed_files=installed, install_dir=font_dir
        )

    def install_all(
        self,
        fonts: Iterable[FontEntry],
        progress_callback: InstallProgressCallback | None = None,
    ) -> InstallReport:
        """
        Install fonts sequentially, continuing past failures.

        Args:
            fonts: Fonts to install, in order
            progress_callback: Optional progress callback

        Returns:
            InstallReport with one result per font
        """
        fonts = list(fonts)
        callback = progress_callback or InstallProgressCallback()
        report = InstallReport()

        callback.on_start(len(fonts))
        for index, font in enumerate(fonts, start=1):
            callback.on_font_start(font, index, len(fonts))
            try:
                result = self.install(font)
            except InstallerError as e:
                logger.error(f"Failed to install '{font.name}': {e}")
                result = FontInstallResult(font=font, success=False, error=str(e))
            report.add(result)
            callback.on_font_complete(result)

        callback.on_complete(report)
        return report

    def close(self) -> None:
        self.downloader.close()
