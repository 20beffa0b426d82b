"""Environment configuration for the inspector wrappers."""

import logging
import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_RUNNER = "npx"
DEFAULT_PACKAGE = "@modelcontextprotocol/inspector"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_RUNNER = "MCP_INSPECTOR_RUNNER"
ENV_PACKAGE = "MCP_INSPECTOR_PACKAGE"
ENV_LOG_LEVEL = "MCP_INSPECTOR_LOG_LEVEL"


class InspectorSettings(BaseModel):
    """How to reach the inspector CLI and how loudly to log."""

    model_config = ConfigDict(frozen=True)

    runner: str = Field(default=DEFAULT_RUNNER, description="Package runner executable")
    package: str = Field(default=DEFAULT_PACKAGE, description="Inspector package spec")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InspectorSettings":
        """
        Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ

        Blank or missing variables keep their defaults.
        """
        if environ is None:
            environ = os.environ

        values = {}
        for field_name, env_name in (
            ("runner", ENV_RUNNER),
            ("package", ENV_PACKAGE),
            ("log_level", ENV_LOG_LEVEL),
        ):
            raw = environ.get(env_name, "").strip()
            if raw:
                values[field_name] = raw
        return cls(**values)


def configure_logging(settings: InspectorSettings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(level=settings.log_level)
