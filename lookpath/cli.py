from __future__ import annotations

import argparse
import json
import sys
import time

from lookpath import __version__
from lookpath.commands.preflight import cmd_preflight
from lookpath.commands.which import cmd_which
from lookpath.config import ConfigValidationError, load_config
from lookpath.exit_codes import EXIT_INTERNAL_ERROR, EXIT_USAGE
from lookpath.types import CommandResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lookpath", description="Locate executables on PATH")
    parser.add_argument("--version", action="version", version=f"lookpath {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common_flags(target: argparse.ArgumentParser) -> None:
        target.add_argument(
            "--json",
            action="store_true",
            default=None,
            help="Output machine-readable JSON",
        )
        target.add_argument(
            "--config",
            help="Config file (default: $LOOKPATH_CONFIG or ./.lookpath.yml)",
        )

    which = subparsers.add_parser("which", help="Print the path the shell would run for each name")
    add_common_flags(which)
    which.add_argument("names", nargs="+", metavar="NAME", help="Program name or path")
    which.add_argument(
        "-a",
        "--all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print every match on PATH, not just the first (--no-all overrides config)",
    )
    which.set_defaults(func=cmd_which)

    preflight = subparsers.add_parser("preflight", help="Check that configured tools are on PATH")
    add_common_flags(preflight)
    preflight.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Extra required tools to check",
    )
    preflight.set_defaults(func=cmd_preflight)

    return parser


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _config_failure(args: argparse.Namespace, command: str, exc: ConfigValidationError, start: float) -> int:
    messages = exc.errors or [str(exc)]
    if getattr(args, "json", False):
        problems = [{"severity": "error", "message": message, "code": "LOOKPATH-CONFIG"} for message in messages]
        payload = CommandResult(
            exit_code=EXIT_USAGE,
            summary=str(exc),
            problems=problems,
        ).to_payload(command, "error", _elapsed_ms(start))
        print(json.dumps(payload, indent=2))
        return EXIT_USAGE
    print(str(exc), file=sys.stderr)
    if exc.errors:
        for message in exc.errors:
            print(f"  {message}", file=sys.stderr)
    return EXIT_USAGE


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    start = time.perf_counter()
    command = args.command

    try:
        args.config_data = load_config(args.config)
    except ConfigValidationError as exc:
        return _config_failure(args, command, exc, start)
    if args.json is None:
        args.json = bool(args.config_data.get("output", {}).get("json", False))

    try:
        result = args.func(args)
    except Exception as exc:  # noqa: BLE001 - surface in JSON mode
        if args.json:
            problems = [
                {
                    "severity": "error",
                    "message": str(exc),
                    "code": "LOOKPATH-UNHANDLED",
                }
            ]
            payload = CommandResult(
                exit_code=EXIT_INTERNAL_ERROR,
                summary=str(exc),
                problems=problems,
            ).to_payload(command, "error", _elapsed_ms(start))
            print(json.dumps(payload, indent=2))
            return EXIT_INTERNAL_ERROR
        raise

    if isinstance(result, CommandResult):
        exit_code = result.exit_code
        command_result = result
    else:
        exit_code = int(result)
        command_result = CommandResult(exit_code=exit_code)

    if not command_result.summary:
        command_result.summary = "OK" if command_result.ok else "Command failed"

    if args.json:
        status = "success" if command_result.ok else "failure"
        payload = command_result.to_payload(command, status, _elapsed_ms(start))
        print(json.dumps(payload, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
