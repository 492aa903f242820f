"""Config management module for lookpath."""

from __future__ import annotations

from lookpath.config.io import load_defaults, load_yaml_file
from lookpath.config.loader import ConfigValidationError, load_config, resolve_config_path
from lookpath.config.merge import deep_merge
from lookpath.config.schema import get_schema, validate_config

__all__ = [
    "ConfigValidationError",
    "deep_merge",
    "get_schema",
    "load_config",
    "load_defaults",
    "load_yaml_file",
    "resolve_config_path",
    "validate_config",
]
