"""Result type shared by the lookpath command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lookpath.exit_codes import EXIT_SUCCESS


@dataclass
class CommandResult:
    """Outcome of one command, rendered as the ``--json`` payload."""

    exit_code: int = EXIT_SUCCESS
    summary: str = ""
    problems: list[dict[str, Any]] = field(default_factory=list)
    suggestions: list[dict[str, Any]] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_SUCCESS

    def to_payload(self, command: str, status: str, duration_ms: int) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "command": command,
            "status": status,
            "exit_code": self.exit_code,
            "duration_ms": duration_ms,
            "summary": self.summary,
            "problems": self.problems,
            "suggestions": self.suggestions,
        }
        if self.data:
            payload["data"] = self.data
        return payload
