"""Configuration management for docmeta."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigError


@dataclass
class LoggingConfig:
    """Logging sink configuration used by the CLI."""

    level: str = "WARNING"
    format: str = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


@dataclass
class InputConfig:
    """Property file input configuration."""

    encoding: str = "utf-8"


@dataclass
class Config:
    """Main application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    input: InputConfig = field(default_factory=InputConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config.apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply environment overrides.

        Args:
            path: Path to the TOML configuration file.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config = cls()
        _update(config.logging, data.get("logging", {}), "logging")
        _update(config.input, data.get("input", {}), "input")
        config.apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, DOCMETA_CONFIG, or the environment alone."""
        path = path or os.environ.get("DOCMETA_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def apply_env(self) -> None:
        """Override settings from environment variables."""
        if level := os.environ.get("DOCMETA_LOG_LEVEL"):
            self.logging.level = level.upper()

        if encoding := os.environ.get("DOCMETA_INPUT_ENCODING"):
            self.input.encoding = encoding


def _update(section: Any, values: Any, table: str) -> None:
    """Copy known keys from a TOML table onto a config section."""
    if not isinstance(values, dict):
        raise ConfigError(f"[{table}] must be a table")
    for key, value in values.items():
        if not hasattr(section, key):
            raise ConfigError(f"Unknown setting in [{table}]: {key}")
        setattr(section, key, value)
