"""CLI entry point for the MCP button handler."""

import json
import logging
import re
import sys
from collections.abc import Sequence
from typing import Optional, Union

from .. import get_version
from ..inspector import InspectorLaunchError, base_command, run_inspector
from ..models import ButtonOptions, EarlyExit
from ..parsing import ArgumentError, check_early_exit, require_server_command, scan_flags
from ..settings import DEFAULT_PACKAGE, InspectorSettings, configure_logging

logger = logging.getLogger("mcp-button-handler")

PROG = "mcp-button-handler"
LIST_PROG = "mcp-list-tools"

VALUE_FLAGS = ("--transport", "--button", "--params")
SWITCH_FLAGS = ("--verbose",)

# Decoded JSON pairs surrogates, so any left over is unpaired
LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")

USAGE = f"""
{PROG} - Handle button presses from MCP servers

USAGE:
  {PROG} [options] <server_command> [args...]
  {PROG} [options] <url>

EXAMPLES:
  # Press a button on a local Node.js server
  {PROG} --button press node build/index.js

  # Pass parameters to the button
  {PROG} --button add --params '{{"a": 1, "b": 2}}' python -m my_mcp_server

  # Press a button on an NPM package server
  {PROG} --button read_file --params '{{"path": "/tmp/notes.txt"}}' \\
      npx @modelcontextprotocol/server-filesystem /tmp

  # Press a button on a remote server
  {PROG} --button press https://my-mcp-server.example.com

OPTIONS:
  --help, -h          Show this help message
  --version, -v       Show version information
  --transport <type>  Specify transport type for remote servers (default: sse)
  --verbose           Show verbose output including the full inspector command
  --button <name>     Specify button name to press
  --params <json>     Parameters to pass to button as JSON object

DESCRIPTION:
  This tool simplifies handling button presses in MCP (Model Context Protocol) servers
  by wrapping the @modelcontextprotocol/inspector CLI with sensible defaults.
"""


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def _parse_params(raw: str) -> dict:
    try:
        params = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ArgumentError(f"Invalid --params JSON: {e}") from e
    if not isinstance(params, dict):
        raise ArgumentError(
            f"Invalid --params JSON: expected an object, got {type(params).__name__}"
        )
    return params


def parse_args(args: Sequence[str]) -> Union[ButtonOptions, EarlyExit]:
    """
    Parse button handler arguments.

    Raises:
        ArgumentError: Missing server command, missing flag value or bad --params JSON
    """
    early = check_early_exit(args)
    if early is not None:
        return early

    flags, server_command = scan_flags(args, VALUE_FLAGS, SWITCH_FLAGS)

    values: dict = {}
    for flag, value in flags:
        if flag == "--transport":
            values["transport"] = value
        elif flag == "--verbose":
            values["verbose"] = True
        elif flag == "--button":
            values["button_name"] = value
        elif flag == "--params":
            values["params"] = _parse_params(value)

    require_server_command(server_command)
    return ButtonOptions(server_command=server_command, **values)


def _dump_payload(payload: dict) -> str:
    """Serialize compactly, keeping non-ASCII text but escaping lone surrogates."""
    text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def build_inspector_command(options: ButtonOptions, package: str = DEFAULT_PACKAGE) -> list[str]:
    """Build the inspector arguments for a button press."""
    command = base_command(options, package)
    command.extend(["--method", "call"])
    if options.button_name:
        payload = {"method": options.button_name, "params": dict(options.params)}
        command.extend(["--params", _dump_payload(payload)])
    return command


def _print_button_hint(options: ButtonOptions) -> None:
    print("No button specified. Available buttons can be listed with:")
    print(f"{LIST_PROG} {' '.join(options.server_command)}")
    print("\nThen use --button <name> to press a specific button.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        try:
            result = parse_args(args)
        except ArgumentError as e:
            print(f"Error: {e}", file=sys.stderr)
            if e.show_usage:
                print(USAGE)
            return 1

        if isinstance(result, EarlyExit):
            if result.action == "version":
                print(f"{PROG} v{get_version()}")
            else:
                print(USAGE)
            return 0

        settings = InspectorSettings.from_env()
        configure_logging(settings)
        logger.debug("Parsed options: %s", result)

        if not result.button_name:
            _print_button_hint(result)
            return 0

        command = build_inspector_command(result, settings.package)
        return run_inspector(command, settings, verbose=result.verbose)
    except InspectorLaunchError as e:
        print(f"Error running inspector: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
