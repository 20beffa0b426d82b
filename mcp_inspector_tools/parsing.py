"""Shared argument scanning for the inspector wrappers.

Both tools accept a few flags followed by a server command. Flags are read
left to right until the first token that is not a known flag; that token and
everything after it form the server command, even when it looks like a flag.
"""

import logging
from collections.abc import Collection, Sequence
from typing import Optional

from .models import EarlyExit

logger = logging.getLogger(__name__)

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")
FLAG_PREFIX = "--"


class ArgumentError(ValueError):
    """Invalid command-line input."""

    def __init__(self, message: str, show_usage: bool = False) -> None:
        super().__init__(message)
        self.show_usage = show_usage


def check_early_exit(args: Sequence[str]) -> Optional[EarlyExit]:
    """Return the help/version short-circuit requested anywhere in args, if any."""
    if not args or any(arg in HELP_FLAGS for arg in args):
        return EarlyExit(action="help")
    if any(arg in VERSION_FLAGS for arg in args):
        return EarlyExit(action="version")
    return None


def scan_flags(
    args: Sequence[str],
    value_flags: Collection[str],
    switch_flags: Collection[str],
) -> tuple[list[tuple[str, Optional[str]]], list[str]]:
    """
    Split args into recognized flags and the server command.

    Args:
        args: Command-line tokens without the program name
        value_flags: Flags that consume the following token as their value
        switch_flags: Flags without a value

    Returns:
        The recognized flags in order as (flag, value) pairs, with value None
        for switches, and the server command tokens (possibly empty).

    Raises:
        ArgumentError: A value flag is the last token.
    """
    flags: list[tuple[str, Optional[str]]] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in value_flags:
            if i + 1 >= len(args):
                raise ArgumentError(f"Option {arg} requires a value", show_usage=True)
            flags.append((arg, args[i + 1]))
            i += 2
        elif arg in switch_flags:
            flags.append((arg, None))
            i += 1
        else:
            if arg.startswith(FLAG_PREFIX):
                logger.debug("Unknown option %s starts the server command", arg)
            return flags, list(args[i:])
    return flags, []


def require_server_command(server_command: Sequence[str]) -> None:
    """Reject an invocation without a server command or URL."""
    if not server_command:
        raise ArgumentError("No server command or URL provided", show_usage=True)
