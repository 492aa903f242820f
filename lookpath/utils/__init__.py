"""Shared utility functions for lookpath.

All public items here should remain stable for backward compatibility.
"""

from __future__ import annotations

from lookpath.utils.exec_utils import resolve_executable

__all__ = [
    "resolve_executable",
]
