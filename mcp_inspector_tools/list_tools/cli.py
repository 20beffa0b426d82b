"""CLI entry point for listing MCP server capabilities."""

import logging
import sys
from collections.abc import Sequence
from typing import Optional, Union

from .. import get_version
from ..inspector import InspectorLaunchError, base_command, run_inspector
from ..models import EarlyExit, ListOptions
from ..parsing import ArgumentError, check_early_exit, require_server_command, scan_flags
from ..settings import DEFAULT_PACKAGE, InspectorSettings, configure_logging

logger = logging.getLogger("mcp-list-tools")

PROG = "mcp-list-tools"

VALUE_FLAGS = ("--transport",)
SWITCH_FLAGS = ("--verbose", "--resources", "--prompts")

METHOD_FLAGS = {
    "--resources": "resources/list",
    "--prompts": "prompts/list",
}

USAGE = f"""
{PROG} - List tools, resources and prompts from MCP servers

USAGE:
  {PROG} [options] <server_command> [args...]
  {PROG} [options] <url>

EXAMPLES:
  # List tools from a local Node.js server
  {PROG} node build/index.js

  # List tools from an NPM package server
  {PROG} npx @modelcontextprotocol/server-filesystem /path/to/directory

  # List resources from a Python server
  {PROG} --resources python -m my_mcp_server

  # List prompts from a remote server
  {PROG} --prompts https://my-mcp-server.example.com

OPTIONS:
  --help, -h          Show this help message
  --version, -v       Show version information
  --transport <type>  Specify transport type for remote servers (default: sse)
  --verbose           Show verbose output including the full inspector command
  --resources         List resources instead of tools
  --prompts           List prompts instead of tools

DESCRIPTION:
  This tool simplifies listing tools in MCP (Model Context Protocol) servers
  by wrapping the @modelcontextprotocol/inspector CLI with sensible defaults.
"""


def parse_args(args: Sequence[str]) -> Union[ListOptions, EarlyExit]:
    """
    Parse list tool arguments.

    Raises:
        ArgumentError: Missing server command or missing --transport value
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
        else:
            values["method"] = METHOD_FLAGS[flag]

    require_server_command(server_command)
    return ListOptions(server_command=server_command, **values)


def build_inspector_command(options: ListOptions, package: str = DEFAULT_PACKAGE) -> list[str]:
    """Build the inspector arguments for a listing request."""
    command = base_command(options, package)
    command.extend(["--method", options.method])
    return command


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
