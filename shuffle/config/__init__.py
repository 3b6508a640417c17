"""Configuration management module for Shuffle."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_app_config, validate_config_file
from .models import (
    AppConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    MeasurementConfig,
    MeasurementStrategy,
    RenderConfig,
    TransformConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "parse_app_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "TransformConfig",
    "RenderConfig",
    "MeasurementConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "MeasurementStrategy",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
