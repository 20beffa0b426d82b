"""Building and running inspector CLI invocations."""

import logging
import shutil
import subprocess
from collections.abc import Sequence

from .models import DEFAULT_TRANSPORT, InvocationOptions
from .settings import DEFAULT_PACKAGE, InspectorSettings

logger = logging.getLogger(__name__)

CLI_MODE_FLAG = "--cli"
VERBOSE_SEPARATOR = "---"


class InspectorLaunchError(RuntimeError):
    """The inspector process could not be started."""


def base_command(options: InvocationOptions, package: str = DEFAULT_PACKAGE) -> list[str]:
    """
    Build the part of the inspector command common to every tool.

    The inspector package and CLI mode flag come first, then the server
    command verbatim. A non-default transport is only forwarded for URL
    targets; for local commands it is dropped.
    """
    command = [package, CLI_MODE_FLAG, *options.server_command]
    if options.transport != DEFAULT_TRANSPORT and options.target_is_url:
        command.extend(["--transport", options.transport])
    return command


def format_command(runner: str, command: Sequence[str]) -> str:
    """Render a command line for display."""
    return " ".join([runner, *command])


def resolve_runner(runner: str) -> str:
    """Locate the package runner on PATH, falling back to the bare name."""
    found = shutil.which(runner)
    if found:
        return found
    logger.debug("%s not found on PATH", runner)
    return runner


def exit_status(returncode: int) -> int:
    """Map a child return code to our exit status; signal N becomes 128 + N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_inspector(
    command: Sequence[str],
    settings: InspectorSettings,
    verbose: bool = False,
) -> int:
    """
    Run the inspector with inherited stdio and wait for it.

    Args:
        command: Inspector arguments, without the package runner
        settings: Runner configuration
        verbose: Print the full command line before running it

    Returns:
        Exit status to report for this invocation

    Raises:
        InspectorLaunchError: The process could not be started
    """
    if verbose:
        print(f"Running: {format_command(settings.runner, command)}")
        print(VERBOSE_SEPARATOR, flush=True)

    executable = resolve_runner(settings.runner)
    logger.debug("Launching %s with %d argument(s)", executable, len(command))

    try:
        completed = subprocess.run([executable, *command], check=False)
    except OSError as e:
        raise InspectorLaunchError(str(e)) from e

    status = exit_status(completed.returncode)
    logger.debug("Inspector exited with %d (status %d)", completed.returncode, status)
    return status
