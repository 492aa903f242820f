"""Command handlers for the lookpath CLI."""

from __future__ import annotations

import argparse
from typing import Any

from lookpath.config import load_config
from lookpath.errors import Cause, ExecutableLookupError

PROBLEM_CODES = {
    Cause.NOT_FOUND: "LOOKPATH-NOT-FOUND",
    Cause.PERMISSION_DENIED: "LOOKPATH-PERMISSION-DENIED",
    Cause.FILESYSTEM: "LOOKPATH-FILESYSTEM",
}


def command_config(args: argparse.Namespace) -> dict[str, Any]:
    """Return the config attached by ``cli.main``, loading it when called directly."""
    config = getattr(args, "config_data", None)
    if config is None:
        config = load_config(getattr(args, "config", None))
    return config


def lookup_problem(err: ExecutableLookupError, severity: str = "error") -> dict[str, Any]:
    return {
        "severity": severity,
        "message": str(err),
        "code": PROBLEM_CODES[err.kind],
        "name": err.name,
        "cause": err.kind.value,
    }
