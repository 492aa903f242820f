"""Executable resolution against the PATH search list.

A name that contains a path separator is checked in place and PATH is never
consulted, which is what the Unix shells do. Any other name is tried in each
PATH directory in order. The returned paths are built from the PATH entries
as written, so they may be absolute or relative to the current directory.

Nothing is cached: PATH is read and the filesystem queried on every call.
"""

from __future__ import annotations

import errno
import os
import stat

from lookpath.errors import ExecutableLookupError, NotFoundInPathError

SEARCH_PATH_VAR = "PATH"

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _has_separator(name: str) -> bool:
    if os.sep in name:
        return True
    return bool(os.altsep) and os.altsep in name


def find_executable(path: str) -> None:
    """Check that a path names an executable, non-directory file.

    Args:
        path: The path to check. Symlinks are followed.

    Raises:
        OSError: Propagated from ``os.stat``; ``FileNotFoundError`` when the
            path does not exist.
        PermissionError: The path is a directory or has no execute bit set
            for owner, group or other.
        ValueError: Propagated from ``os.stat`` for a path it cannot encode,
            such as one with an embedded NUL byte.
    """
    mode = os.stat(path).st_mode
    if not stat.S_ISDIR(mode) and mode & _EXEC_BITS:
        return
    raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)


def _look_paths(name: str, stop_at_first: bool) -> tuple[list[str], ExecutableLookupError | None]:
    if _has_separator(name):
        try:
            find_executable(name)
        except (OSError, ValueError) as exc:
            return [], ExecutableLookupError(name, exc)
        return [name], None

    search_path = os.environ.get(SEARCH_PATH_VAR, "")
    if not search_path:
        return [], ExecutableLookupError(name, NotFoundInPathError())

    found: list[str] = []
    for directory in search_path.split(os.pathsep):
        # An empty PATH entry means the current directory.
        candidate = os.path.join(directory or os.curdir, name)
        try:
            find_executable(candidate)
        except (OSError, ValueError):
            continue
        found.append(candidate)
        if stop_at_first:
            break

    if not found:
        return [], ExecutableLookupError(name, NotFoundInPathError())
    return found, None


def lookup(name: str) -> str:
    """Return the first executable called ``name`` on PATH.

    Args:
        name: A bare program name, or a path containing a separator.

    Returns:
        The matching path, as built from the PATH entry (or ``name`` itself
        for a direct path).

    Raises:
        ExecutableLookupError: Nothing matched.
    """
    found, error = _look_paths(name, stop_at_first=True)
    if error is not None:
        raise error from error.cause
    return found[0]


def lookup_all(name: str) -> list[str]:
    """Return every executable called ``name`` on PATH, in PATH order.

    Raises:
        ExecutableLookupError: Nothing matched.
    """
    found, error = _look_paths(name, stop_at_first=False)
    if error is not None:
        raise error from error.cause
    return found
