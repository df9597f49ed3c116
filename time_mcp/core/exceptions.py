"""Custom exception hierarchy for the time MCP server."""

from typing import Any


class TimeServerError(Exception):
    """Base exception for server-level issues."""


class ToolRegistryError(TimeServerError):
    """Raised when a tool cannot be registered."""


class DuplicateToolError(ToolRegistryError):
    """Raised when a tool name is already taken on the server."""


class ToolInvocationError(TimeServerError):
    """Raised when a tool call cannot be dispatched."""


class UnknownToolError(ToolInvocationError, KeyError):
    """Raised when no tool is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown tool"


class ToolArgumentsError(ToolInvocationError):
    """Raised when call arguments do not match the tool's input schema."""

    def __init__(self, name: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"Invalid arguments for tool {name!r}")
        self.name = name
        self.errors = errors
