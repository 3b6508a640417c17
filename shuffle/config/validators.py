"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

KNOWN_SECTIONS = {"transform", "render", "measurement", "logging"}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    # Unknown sections are silently ignored by the models
    for key in sorted(set(config_dict) - KNOWN_SECTIONS):
        warning_messages.append(f"Unknown configuration section '{key}' will be ignored")

    # Padding that leaves no room for text disables reflow
    render = config_dict.get("render", {})
    if isinstance(render, dict):
        width = render.get("width")
        padding = render.get("horizontal_padding")
        if isinstance(width, (int, float)) and isinstance(padding, (int, float)) and padding >= width:
            warning_messages.append(
                f"render.horizontal_padding ({padding}) leaves no room for text at width {width}; "
                "reflow will be skipped"
            )

    measurement = config_dict.get("measurement", {})
    if isinstance(measurement, dict):
        strategy = str(measurement.get("strategy", "proportional")).strip().lower()
        if "char_width_ratio" in measurement and strategy != "monospace":
            warning_messages.append(
                f"measurement.char_width_ratio only applies to the monospace strategy (got '{strategy}')"
            )
        if "cache_size" in measurement and not measurement.get("cache", False):
            warning_messages.append(
                "measurement.cache_size is set but measurement.cache is disabled"
            )

    transform = config_dict.get("transform", {})
    if isinstance(transform, dict):
        output_format = str(transform.get("format", "markdown")).strip().lower()
        if transform.get("compact") is not None and output_format not in ("json", "json-separated"):
            warning_messages.append(
                f"transform.compact only affects JSON formats (format is '{output_format}')"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
