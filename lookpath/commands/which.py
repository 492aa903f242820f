"""Resolve program names the way the shell would."""

from __future__ import annotations

import argparse
from typing import Any

from rich.console import Console

from lookpath.commands import command_config, lookup_problem
from lookpath.errors import ExecutableLookupError
from lookpath.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from lookpath.resolver import lookup, lookup_all
from lookpath.types import CommandResult


def _resolve(name: str, find_all: bool) -> tuple[list[str], ExecutableLookupError | None]:
    try:
        if find_all:
            return lookup_all(name), None
        return [lookup(name)], None
    except ExecutableLookupError as exc:
        return [], exc


def cmd_which(args: argparse.Namespace) -> int | CommandResult:
    config = command_config(args)
    json_mode = bool(getattr(args, "json", False))
    find_all = getattr(args, "all", None)
    if find_all is None:
        find_all = bool(config.get("which", {}).get("all", False))

    results: list[dict[str, Any]] = []
    problems: list[dict[str, Any]] = []
    for name in args.names:
        paths, error = _resolve(name, find_all)
        entry: dict[str, Any] = {"name": name, "found": bool(paths), "paths": paths}
        if error is not None:
            entry["cause"] = error.kind.value
            problems.append(lookup_problem(error))
        results.append(entry)

    missing = len(problems)
    exit_code = EXIT_FAILURE if missing else EXIT_SUCCESS
    summary = f"{missing} of {len(results)} names not found" if missing else "All names resolved"

    if json_mode:
        return CommandResult(
            exit_code=exit_code,
            summary=summary,
            problems=problems,
            data={"all": find_all, "results": results},
        )

    out = Console(soft_wrap=True, highlight=False, emoji=False)
    err = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
    for entry in results:
        for path in entry["paths"]:
            out.print(path, markup=False)
    for problem in problems:
        err.print(problem["message"], style="red", markup=False)
    return exit_code
