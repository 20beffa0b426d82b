"""Command-line shortcuts around the MCP inspector CLI."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "mcp-inspector-tools"


def get_version() -> str:
    """Return the installed distribution version."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["DISTRIBUTION_NAME", "get_version"]
