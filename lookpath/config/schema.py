"""Schema loading and validation utilities for lookpath config."""

from __future__ import annotations

import json
from typing import Any

from jsonschema import Draft7Validator

from lookpath.config.io import data_dir


def get_schema() -> dict[str, Any]:
    """Load the lookpath config schema.

    Returns:
        Parsed JSON schema as a dict.
    """
    schema_path = data_dir() / "lookpath.schema.json"
    data = json.loads(schema_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Schema at {schema_path} is not a JSON object")
    return data


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate a config dict against the lookpath schema.

    Args:
        config: Configuration data to validate.

    Returns:
        Sorted list of validation error strings.
    """
    validator = Draft7Validator(get_schema())
    errors: list[str] = []
    for err in validator.iter_errors(config):
        path = ".".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{path}: {err.message}")
    return sorted(errors)
