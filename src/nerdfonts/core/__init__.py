"""Core components for the Nerd Font installer."""

from .config import InstallerConfig
from .exceptions import (
    ArchiveError,
    ArchiveWriteError,
    ConfigurationError,
    DownloadError,
    InstallerError,
    InstallPathError,
)
from .models import FontEntry, FontInstallResult, InstallReport

__all__ = [
    "ArchiveError",
    "ArchiveWriteError",
    "ConfigurationError",
    "DownloadError",
    "FontEntry",
    "FontInstallResult",
    "InstallPathError",
    "InstallReport",
    "InstallerConfig",
    "InstallerError",
]
