"""Environment variable loading and validation."""

import os
from typing import Optional

from shuffle.serialization.models import FormatKind

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
        default_format: Optional[str] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"
        self.default_format = default_format


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - ENVIRONMENT: Environment label attached to every log record (default: local)
    - SHUFFLE_FORMAT: Default output format (markdown, latex, json, json-separated, html)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable holds an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    environment = os.getenv("ENVIRONMENT")
    default_format = os.getenv("SHUFFLE_FORMAT")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.strip().lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    if default_format:
        kind = FormatKind.parse(default_format)
        if kind is None:
            valid_formats = ", ".join(kind.value for kind in FormatKind)
            errors.append(
                f"Invalid SHUFFLE_FORMAT: '{default_format}'. Must be one of: {valid_formats}"
            )
        else:
            default_format = kind.value

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        log_format=log_format or None,
        environment=environment,
        default_format=default_format or None,
    )
