"""Configuration management for the Nerd Font installer."""

import tempfile
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nerdfonts import __version__

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    EmptyConfigFileError,
    FontExtensionError,
    InvalidBaseUrlError,
    InvalidYamlError,
)

DEFAULT_RELEASE_BASE_URL = "https://github.com/ryanoasis/nerd-fonts/releases/latest/download"


class InstallerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NERDFONTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Download and install configuration."""

    # Download settings
    release_base_url: str = Field(
        DEFAULT_RELEASE_BASE_URL, description="Base URL of the latest font release assets"
    )
    timeout_seconds: float = Field(60.0, gt=0.0, description="HTTP request timeout")
    chunk_size: int = Field(8192, gt=0, description="Download chunk size in bytes")
    user_agent: str = Field(f"nerd-font-installer/{__version__}", description="HTTP user agent")
    show_progress: bool = Field(True, description="Show a download spinner")

    # Storage
    temp_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Directory for downloaded archives",
    )
    font_dir: Path | None = Field(
        None, description="Install directory override (default: OS user font directory)"
    )

    # Extraction
    font_extensions: tuple[str, ...] = Field(
        (".ttf", ".otf"), description="Archive member suffixes to install (case-sensitive)"
    )

    @field_validator("release_base_url")
    @classmethod
    def validate_release_base_url(cls, v):
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise InvalidBaseUrlError()
        return v.rstrip("/")

    @field_validator("font_extensions")
    @classmethod
    def validate_font_extensions(cls, v):
        for extension in v:
            if not extension.startswith("."):
                raise FontExtensionError(extension)
        return tuple(v)

    def asset_url(self, asset_name: str) -> str:
        """Build the download URL for a release asset."""
        return f"{self.release_base_url}/{asset_name}"

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "InstallerConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "InstallerConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        # Load from environment variables/.env file
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(str(config_path))

    try:
        # YAML values take precedence, .env is not consulted for file-based configs
        return config_class(_env_file=None, **config_data)
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
