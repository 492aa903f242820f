"""Executable resolution utilities."""

from __future__ import annotations

from lookpath.errors import ExecutableLookupError
from lookpath.resolver import lookup


def resolve_executable(name: str) -> str:
    """Resolve an executable name to its path on PATH.

    Args:
        name: The executable name to resolve.

    Returns:
        The resolved path if found, otherwise the original name.
    """
    try:
        return lookup(name)
    except ExecutableLookupError:
        return name
