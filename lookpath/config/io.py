"""Config file I/O helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def data_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "data"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning an empty dict if the file is missing.

    Raises:
        ValueError: The file is not valid YAML or its top level is not a mapping.
    """
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}")
    return content


def load_defaults() -> dict[str, Any]:
    return load_yaml_file(data_dir() / "defaults.yaml")
