"""Font Management Module
======================

Catalog lookup, selection, platform font directories and the
download-extract-install pipeline.
"""

from .catalog import CATALOG, get_catalog
from .downloader import FontDownloader
from .installer import FontInstaller, InstallProgressCallback, extract_fonts
from .platform import Platform, detect_platform, resolve_font_dir
from .selector import parse_selection, select_by_names, select_interactively

__all__ = [
    "CATALOG",
    "FontDownloader",
    "FontInstaller",
    "InstallProgressCallback",
    "Platform",
    "detect_platform",
    "extract_fonts",
    "get_catalog",
    "parse_selection",
    "resolve_font_dir",
    "select_by_names",
    "select_interactively",
]
