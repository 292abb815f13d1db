"""Configuration management for billtext."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    FilteringConfig,
    HttpConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    ReclassifierConfig,
    ReclassifierMode,
)

__all__ = [
    # Loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ReclassifierConfig",
    "FilteringConfig",
    "HttpConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "ReclassifierMode",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
