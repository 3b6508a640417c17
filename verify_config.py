#!/usr/bin/env python3
"""Simple script to verify config.example.yaml structure without the package installed."""

from pathlib import Path

import yaml

SECTIONS = {
    "transform": {"format": str, "preserve_margins": bool, "compact": (bool, type(None))},
    "render": {"width": (int, float), "font_size": (int, float), "horizontal_padding": (int, float)},
    "measurement": {"strategy": str, "char_width_ratio": (int, float), "cache": bool, "cache_size": int},
    "logging": {"level": str, "format": str},
}

VALID_FORMATS = ["markdown", "latex", "json", "json-separated", "html"]
VALID_STRATEGIES = ["proportional", "monospace"]


def _matches(value, expected_type) -> bool:
    # bool is an int subclass; only accept it where bool is expected
    if isinstance(value, bool):
        expected = expected_type if isinstance(expected_type, tuple) else (expected_type,)
        return bool in expected
    return isinstance(value, expected_type)


def verify_config_structure(config_file: Path = Path("config.example.yaml")) -> bool:
    """Verify config.example.yaml has the expected structure."""
    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return False

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        print(f"✗ Failed to parse {config_file}: {e}")
        return False

    if not isinstance(config, dict):
        print(f"✗ {config_file} must contain a mapping")
        return False

    errors = []

    for section, value in config.items():
        if section not in SECTIONS:
            errors.append(f"Unknown section: {section}")
            continue
        if not isinstance(value, dict):
            errors.append(f"'{section}' must be a dictionary")
            continue

        for key, item in value.items():
            expected_type = SECTIONS[section].get(key)
            if expected_type is None:
                errors.append(f"Unknown key: {section}.{key}")
            elif not _matches(item, expected_type):
                errors.append(f"'{section}.{key}' has the wrong type")

    transform = config.get("transform") or {}
    if isinstance(transform, dict) and "format" in transform:
        if str(transform["format"]).lower() not in VALID_FORMATS:
            errors.append(f"Invalid transform.format: {transform['format']}")

    measurement = config.get("measurement") or {}
    if isinstance(measurement, dict) and "strategy" in measurement:
        if measurement["strategy"] not in VALID_STRATEGIES:
            errors.append(f"Invalid measurement.strategy: {measurement['strategy']}")

    if errors:
        print(f"✗ {config_file} validation failed:")
        for error in errors:
            print(f"  - {error}")
        return False

    print(f"✓ {config_file} structure is valid")
    print(f"  - Output format: {transform.get('format', 'markdown')}")
    render = config.get("render") or {}
    print(f"  - Editor: {render.get('width', 1125)}px wide, {render.get('font_size', 16)}px font")
    print(f"  - Measurement: {measurement.get('strategy', 'proportional')}")
    return True


if __name__ == "__main__":
    import sys
    success = verify_config_structure()
    sys.exit(0 if success else 1)
