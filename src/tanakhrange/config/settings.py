"""tanakh-range configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tanakhrange.exceptions import ConfigurationError, check_config_keys

DEFAULT_CORPUS_URL = (
    "https://raw.githubusercontent.com/shlmt/Tanakh-JSON/refs/heads/main/tanakh.json"
)


class TanakhRangeSettings(BaseSettings):
    """tanakh-range configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: tanakh-range extract --corpus ./tanakh.json ...

    2. Config file values (YAML, TOML, or JSON)
       Example: tanakh-range --config myconfig.yaml
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with TANAKH_)
       Example: export TANAKH_CORPUS_PATH=/data/tanakh.json

    4. .env file (in current directory)

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="TANAKH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Corpus settings
    corpus_path: Path | None = Field(
        default=None,
        description="Local JSON corpus file; takes priority over corpus_url",
    )
    corpus_url: str = Field(
        default=DEFAULT_CORPUS_URL,
        description="URL the JSON corpus is fetched from when no local file is set",
    )
    fetch_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds when fetching the corpus",
        gt=0,
    )

    # Rendering settings
    chapter_prefix: str = Field(
        default="פרק",
        description="Word printed before the chapter label in chapter headers",
    )
    separator_width: int = Field(
        default=20,
        description="Number of '-' characters in the line under a chapter header",
        ge=0,
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("corpus_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ~, then resolve the path."""
        if v is None:
            return None
        if isinstance(v, str):
            if not v.strip():
                return None
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.expanduser().resolve()
        raise ValueError(
            f"Path fields must be str or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @classmethod
    def from_env(cls) -> TanakhRangeSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> TanakhRangeSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> TanakhRangeSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            cli_args: Dictionary of CLI arguments. None values are ignored.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        for config_file in config_files or []:
            try:
                file_settings = cls.from_file(config_file)
            except FileNotFoundError:
                from tanakhrange.config.logging import get_logger as _get_logger

                _get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )
                continue
            data.update(file_settings.model_dump(exclude_unset=True))

        if cli_args:
            data.update({k: v for k, v in cli_args.items() if v is not None})

        return cls(**data)


# Global settings instance
_settings: TanakhRangeSettings | None = None


def _get_config_paths() -> list[Path | str]:
    """Get the existing config files, in priority order (later override earlier)."""
    potential_paths = [
        Path.home() / ".config" / "tanakh-range" / "config.yaml",
        Path.home() / ".config" / "tanakh-range" / "config.toml",
        Path.home() / ".config" / "tanakh-range" / "config.json",
        Path.cwd() / "tanakh-range.yaml",
        Path.cwd() / "tanakh-range.toml",
        Path.cwd() / "tanakh-range.json",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue
    return existing_paths


def get_settings() -> TanakhRangeSettings:
    """Get the global settings instance.

    Loads configuration from config files and the environment on first call.

    Returns:
        Global TanakhRangeSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = TanakhRangeSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = TanakhRangeSettings.from_env()
    return _settings


def set_settings(settings: TanakhRangeSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This forces get_settings() to re-read from environment variables
    and configuration files on the next call.
    """
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> TanakhRangeSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g., corpus_path).
                      Only non-None values are applied.

    Returns:
        TanakhRangeSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return TanakhRangeSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    filtered = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if filtered:
        data = settings.model_dump()
        data.update(filtered)
        settings = TanakhRangeSettings(**data)
    return settings
