"""Custom exceptions for the Nerd Font installer."""

from typing import Any


class InstallerError(Exception):
    """Base exception for all installer errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class DownloadError(InstallerError):
    """Exception raised when a font archive cannot be downloaded."""


class ArchiveWriteError(InstallerError):
    """Exception raised when the downloaded archive cannot be written to disk."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to write {path}: {error}")


class ArchiveError(InstallerError):
    """Exception raised when a font archive cannot be opened or read."""


class InstallPathError(InstallerError):
    """Exception raised when the font install directory cannot be resolved or created."""


class ConfigurationError(InstallerError):
    """Exception raised for configuration errors."""


# Specific exception classes for TRY003 compliance
class DownloadStatusError(DownloadError):
    """Exception raised when the release server answers with a non-success status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"Failed to download font zip: HTTP {status_code} for {url}")
        self.status_code = status_code


class DownloadTransportError(DownloadError):
    """Exception raised when the HTTP request itself fails."""

    def __init__(self, url: str, error: str):
        super().__init__(f"Failed to download {url}: {error}")


class HomeDirectoryNotFoundError(InstallPathError):
    """Exception raised when no home or data directory can be resolved."""

    def __init__(self, kind: str = "home"):
        super().__init__(f"Cannot find {kind} directory")


class UnsupportedPlatformError(InstallPathError):
    """Exception raised for operating systems without a known font directory."""

    def __init__(self, platform_name: str):
        super().__init__(f"Unsupported OS: {platform_name}")


class FontDirectoryCreationError(InstallPathError):
    """Exception raised when the font directory cannot be created."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Cannot create font directory {path}: {error}")


class InvalidArchiveError(ArchiveError):
    """Exception raised when the downloaded file is not a readable zip archive."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Invalid font archive {path}: {error}")


class FontExtensionError(ValueError):
    """Exception raised for font extensions that do not start with a dot."""

    def __init__(self, extension: str):
        super().__init__(f"Font extension must start with '.': {extension}")


class InvalidBaseUrlError(ValueError):
    """Exception raised for release base URLs without an http(s) scheme."""

    def __init__(self):
        super().__init__("Release base URL must start with https:// or http://")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
