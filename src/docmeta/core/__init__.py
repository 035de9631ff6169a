"""Core configuration and errors for docmeta."""

from .config import Config, InputConfig, LoggingConfig
from .exceptions import (
    ConfigError,
    DocMetaError,
    PropertiesFileError,
    PropertyTypeMismatch,
)
from .logging import configure_logging

__all__ = [
    "Config",
    "InputConfig",
    "LoggingConfig",
    "ConfigError",
    "DocMetaError",
    "PropertiesFileError",
    "PropertyTypeMismatch",
    "configure_logging",
]
