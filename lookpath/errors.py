"""Structured errors for executable lookups.

Every failed lookup is reported as an ``ExecutableLookupError`` carrying the
name that was requested and the underlying cause, so callers can branch on
``err.kind`` instead of parsing messages.
"""

from __future__ import annotations

from enum import Enum


class NotFoundInPathError(LookupError):
    """Raised as the cause when no directory in the search list matched."""

    def __init__(self, message: str = "executable file not found in $PATH") -> None:
        super().__init__(message)


class Cause(str, Enum):
    """Coarse classification of a lookup failure."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    FILESYSTEM = "filesystem"


def classify(cause: BaseException) -> Cause:
    """Map an underlying exception onto a ``Cause``."""
    if isinstance(cause, (NotFoundInPathError, FileNotFoundError)):
        return Cause.NOT_FOUND
    if isinstance(cause, PermissionError):
        # Directories and files without execute bits land here too.
        return Cause.PERMISSION_DENIED
    return Cause.FILESYSTEM


class ExecutableLookupError(Exception):
    """Raised when a name cannot be resolved to an executable file.

    Attributes:
        name: The name exactly as it was requested.
        cause: The exception that made the lookup fail.
    """

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(name, cause)
        self.name = name
        self.cause = cause

    @property
    def kind(self) -> Cause:
        return classify(self.cause)

    def __str__(self) -> str:
        return f'exec: "{self.name}": {self.cause}'
