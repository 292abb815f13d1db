#!/usr/bin/env python3
"""Simple script to verify config.example.yaml structure without importing billtext."""

import yaml
from pathlib import Path

SECTIONS = {
    "reclassifier": {"mode": str, "line_number_width": int, "max_join_length": int},
    "filtering": {"enabled": bool},
    "http": {"timeout": int, "user_agent": str, "verify_ssl": bool, "max_pdf_size_mb": int},
    "logging": {"level": str, "format": str},
}


def verify_config_structure(config_file: Path = Path("config.example.yaml")) -> bool:
    """Verify a billtext config file has the expected sections and value types."""
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
        print(f"✗ {config_file} must contain a mapping at the top level")
        return False

    errors = []

    for key in config:
        if key not in SECTIONS:
            errors.append(f"Unknown section: {key}")

    for section, fields in SECTIONS.items():
        values = config.get(section)
        if values is None:
            continue
        if not isinstance(values, dict):
            errors.append(f"'{section}' must be a dictionary")
            continue
        for field, expected_type in fields.items():
            if field in values and not isinstance(values[field], expected_type):
                errors.append(f"'{section}.{field}' must be of type {expected_type.__name__}")

    mode = config.get("reclassifier", {}).get("mode") if isinstance(config.get("reclassifier"), dict) else None
    if mode is not None and mode not in ("strict", "structural"):
        errors.append(f"reclassifier.mode has invalid value: {mode}")

    if errors:
        print(f"✗ {config_file} validation failed:")
        for error in errors:
            print(f"  - {error}")
        return False

    print(f"✓ {config_file} structure is valid")
    print(f"  - Sections: {', '.join(sorted(config)) or 'none (defaults)'}")
    print(f"  - Reclassifier mode: {mode or 'structural (default)'}")
    return True


if __name__ == "__main__":
    import sys
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config.example.yaml")
    sys.exit(0 if verify_config_structure(path) else 1)
