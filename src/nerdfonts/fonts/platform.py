"""
Platform Resolver
=================

Maps an operating system to its user-scoped font installation directory.
"""

import logging
import os
import platform as _platform
from enum import Enum
from pathlib import Path

from nerdfonts.core.exceptions import HomeDirectoryNotFoundError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Supported operating systems."""

    MACOS = "macOS"
    LINUX = "Linux"
    WINDOWS = "Windows"
    UNKNOWN = "Unknown"


_SYSTEM_NAMES = {
    "darwin": Platform.MACOS,
    "linux": Platform.LINUX,
    "windows": Platform.WINDOWS,
}


def detect_platform(system: str | None = None) -> Platform:
    """
    Detect the running operating system.

    Args:
        system: Optional ``platform.system()`` value to map instead of the live one

    Returns:
        Matching Platform, or Platform.UNKNOWN
    """
    system = (system if system is not None else _platform.system()).lower()
    return _SYSTEM_NAMES.get(system, Platform.UNKNOWN)


def _home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise HomeDirectoryNotFoundError("home") from e


def _data_dir() -> Path:
    appdata = os.environ.get("APPDATA")
    if not appdata:
        raise HomeDirectoryNotFoundError("data")
    return Path(appdata)


def resolve_font_dir(
    platform: Platform, home: Path | None = None, data_dir: Path | None = None
) -> Path:
    """
    Get the user font directory for a platform.

    The directory is not created here.

    Args:
        platform: Target operating system
        home: Home directory override (macOS, Linux)
        data_dir: Roaming application data override (Windows)

    Returns:
        Absolute path of the user font directory

    Raises:
        HomeDirectoryNotFoundError: If the home or data directory cannot be resolved
        UnsupportedPlatformError: If the platform has no known font directory
    """
    if platform == Platform.MACOS:
        font_dir = (home or _home_dir()) / "Library" / "Fonts"
    elif platform == Platform.LINUX:
        font_dir = (home or _home_dir()) / ".local" / "share" / "fonts"
    elif platform == Platform.WINDOWS:
        font_dir = (data_dir or _data_dir()) / "Microsoft" / "Windows" / "Fonts"
    else:
        raise UnsupportedPlatformError(platform.value)

    logger.debug(f"Font directory for {platform.value}: {font_dir}")
    return font_dir
