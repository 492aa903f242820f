"""Locate executables the way the shell does."""

from __future__ import annotations

__version__ = "0.1.0"

from lookpath.errors import Cause, ExecutableLookupError, NotFoundInPathError  # noqa: E402
from lookpath.resolver import find_executable, lookup, lookup_all  # noqa: E402
from lookpath.utils.exec_utils import resolve_executable  # noqa: E402

__all__ = [
    "Cause",
    "ExecutableLookupError",
    "NotFoundInPathError",
    "__version__",
    "find_executable",
    "lookup",
    "lookup_all",
    "resolve_executable",
]
