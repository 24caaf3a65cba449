"""Nerd Font Installer
===================

List, download and install patched Nerd Fonts into the user font
directory of macOS, Linux and Windows.
"""

__version__ = "1.0.0"

from .core.config import InstallerConfig  # noqa: E402
from .core.exceptions import InstallerError  # noqa: E402
from .core.models import FontEntry, FontInstallResult, InstallReport  # noqa: E402
from .fonts import FontInstaller, Platform, get_catalog  # noqa: E402

__all__ = [
    "FontEntry",
    "FontInstallResult",
    "FontInstaller",
    "InstallReport",
    "InstallerConfig",
    "InstallerError",
    "Platform",
    "__version__",
    "get_catalog",
]
