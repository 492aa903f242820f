"""Preflight checks that the tools a workflow needs are on PATH."""

from __future__ import annotations

import argparse
from typing import Any

from rich.console import Console
from rich.markup import escape

from lookpath.commands import command_config, lookup_problem
from lookpath.errors import Cause, ExecutableLookupError
from lookpath.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from lookpath.resolver import lookup
from lookpath.types import CommandResult

STATUS_STYLES = {"ok": "green", "warn": "yellow", "fail": "red"}


def _add_check(
    checks: list[dict[str, Any]],
    name: str,
    ok: bool,
    required: bool,
    detail: str,
    hint: str | None = None,
) -> None:
    status = "ok" if ok else ("fail" if required else "warn")
    entry = {
        "name": name,
        "status": status,
        "required": required,
        "detail": detail,
    }
    if hint:
        entry["hint"] = hint
    checks.append(entry)


def _planned_tools(config: dict[str, Any], extra: list[str]) -> list[tuple[str, bool]]:
    """Return ``(name, required)`` pairs in check order; required wins on duplicates."""
    settings = config.get("preflight", {})
    required = list(settings.get("required", [])) + list(extra)
    optional = list(settings.get("optional", []))
    planned: dict[str, bool] = {}
    for name in required:
        planned.setdefault(name, True)
    for name in optional:
        planned.setdefault(name, False)
    return list(planned.items())


def _detail(err: ExecutableLookupError) -> str:
    if err.kind is Cause.NOT_FOUND:
        return "not found"
    if err.kind is Cause.PERMISSION_DENIED:
        return "not executable"
    return str(err.cause)


def cmd_preflight(args: argparse.Namespace) -> int | CommandResult:
    config = command_config(args)
    json_mode = bool(getattr(args, "json", False))
    hints = config.get("preflight", {}).get("hints", {})

    checks: list[dict[str, Any]] = []
    problems: list[dict[str, Any]] = []
    for name, required in _planned_tools(config, list(getattr(args, "names", None) or [])):
        try:
            path = lookup(name)
        except ExecutableLookupError as exc:
            hint = hints.get(name) or f"Install {name}"
            _add_check(checks, name, False, required, _detail(exc), hint)
            problems.append(lookup_problem(exc, "error" if required else "warning"))
            continue
        _add_check(checks, name, True, required, path)

    required_failures = [c for c in checks if c["required"] and c["status"] != "ok"]
    exit_code = EXIT_FAILURE if required_failures else EXIT_SUCCESS

    summary = f"{len(required_failures)} required checks failed" if required_failures else "Preflight OK"

    if json_mode:
        return CommandResult(
            exit_code=exit_code,
            summary=summary,
            problems=problems,
            suggestions=[{"message": c["hint"]} for c in checks if "hint" in c],
            data={"checks": checks},
        )

    console = Console(soft_wrap=True, highlight=False, emoji=False)
    for check in checks:
        style = STATUS_STYLES[check["status"]]
        label = escape(f"[{check['status'].upper()}]")
        console.print(f"[{style}]{label}[/{style}] {escape(check['name'])}: {escape(check['detail'])}")
        hint = check.get("hint")
        if hint:
            console.print(f"  -> {escape(hint)}")
    console.print(summary, markup=False)

    return exit_code
