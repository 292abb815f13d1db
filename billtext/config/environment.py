"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class EnvironmentConfig:
    """Environment variable overrides. None means "not set"."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        verify_ssl: Optional[bool] = None,
        http_timeout: Optional[int] = None,
        environment: Optional[str] = None,
    ):
        self.log_level = log_level
        self.verify_ssl = verify_ssl
        self.http_timeout = http_timeout
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - BILLTEXT_VERIFY_SSL: Override certificate validation (true/false)
    - BILLTEXT_HTTP_TIMEOUT: Override request timeout in seconds (5-300)
    - ENVIRONMENT: Label attached to log records (default: local)

    Returns:
        EnvironmentConfig with validated values

    Raises:
        ConfigurationError: If any variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    verify_ssl_str = os.getenv("BILLTEXT_VERIFY_SSL")
    timeout_str = os.getenv("BILLTEXT_HTTP_TIMEOUT")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    verify_ssl = None
    if verify_ssl_str:
        normalized = verify_ssl_str.strip().lower()
        if normalized in _TRUE_VALUES:
            verify_ssl = True
        elif normalized in _FALSE_VALUES:
            verify_ssl = False
        else:
            errors.append(
                f"Invalid BILLTEXT_VERIFY_SSL: '{verify_ssl_str}'. Use true or false."
            )

    http_timeout = None
    if timeout_str:
        try:
            http_timeout = int(timeout_str)
            if not 5 <= http_timeout <= 300:
                errors.append(
                    f"Invalid BILLTEXT_HTTP_TIMEOUT: {http_timeout}. Must be between 5 and 300."
                )
        except ValueError:
            errors.append(
                f"Invalid BILLTEXT_HTTP_TIMEOUT: '{timeout_str}'. Must be a valid integer."
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need to override",
            ],
            source="environment",
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        verify_ssl=verify_ssl,
        http_timeout=http_timeout,
        environment=environment,
    )
