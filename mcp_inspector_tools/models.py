"""Data models for inspector invocations."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TRANSPORT = "sse"

ListMethod = Literal["tools/list", "resources/list", "prompts/list"]


class InvocationOptions(BaseModel):
    """Options shared by every inspector wrapper."""

    model_config = ConfigDict(frozen=True)

    server_command: tuple[str, ...] = Field(
        min_length=1, description="Server command line or a single URL"
    )
    transport: str = Field(
        default=DEFAULT_TRANSPORT, description="Transport type, only used for URL targets"
    )
    verbose: bool = Field(default=False, description="Echo the inspector command before running it")

    @property
    def target_is_url(self) -> bool:
        """Whether the server command points at a remote server."""
        return self.server_command[0].startswith("http")


class ButtonOptions(InvocationOptions):
    """Options for pressing a button (calling a tool) on a server."""

    button_name: Optional[str] = Field(None, description="Button (tool) name to press")
    params: Mapping[str, Any] = Field(default_factory=dict, description="Parameters passed to the button")

    @field_validator("params")
    @classmethod
    def _freeze_params(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))


class ListOptions(InvocationOptions):
    """Options for listing tools, resources or prompts of a server."""

    method: ListMethod = Field(default="tools/list", description="Listing method to request")


class EarlyExit(BaseModel):
    """Parse result for invocations that stop before running anything."""

    model_config = ConfigDict(frozen=True)

    action: Literal["help", "version"]
