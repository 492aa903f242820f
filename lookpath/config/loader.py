"""
lookpath - Configuration Loader

Merges configuration from two sources with proper precedence:
  1. The user config file (highest priority): --config, else $LOOKPATH_CONFIG,
     else ./.lookpath.yml when it exists
  2. The packaged data/defaults.yaml (lowest priority)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from lookpath.config.io import load_defaults, load_yaml_file
from lookpath.config.merge import deep_merge
from lookpath.config.schema import validate_config

CONFIG_ENV_VAR = "LOOKPATH_CONFIG"
LOCAL_CONFIG_NAME = ".lookpath.yml"


class ConfigValidationError(Exception):
    """Raised when the merged lookpath config cannot be loaded or validated."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def resolve_config_path(explicit: str | None = None) -> tuple[Path | None, bool]:
    """Pick the user config file.

    Returns:
        ``(path, required)`` where ``required`` is True when the file was named
        explicitly and must therefore exist.
    """
    if explicit:
        return Path(explicit), True
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env), True
    local = Path.cwd() / LOCAL_CONFIG_NAME
    if local.exists():
        return local, False
    return None, False


def load_config(explicit: str | None = None) -> dict[str, Any]:
    """
    Load the effective lookpath configuration.

    Args:
        explicit: Optional path given on the command line.

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigValidationError: The user file is missing, unreadable or invalid.
    """
    path, required = resolve_config_path(explicit)
    user_config: dict[str, Any] = {}
    if path is not None:
        if required and not path.exists():
            raise ConfigValidationError(f"Config file not found: {path}")
        try:
            user_config = load_yaml_file(path)
        except ValueError as exc:
            raise ConfigValidationError(str(exc)) from exc
        except OSError as exc:
            raise ConfigValidationError(f"Cannot read config {path}: {exc}") from exc

    merged = deep_merge(load_defaults(), user_config)
    errors = validate_config(merged)
    if errors:
        source = path or "defaults"
        raise ConfigValidationError(f"Config validation failed for {source}", errors)
    return merged
