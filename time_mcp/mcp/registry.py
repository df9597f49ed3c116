"""Shared FastMCP instance and the tool registry built on top of it.

Every tool is a plain :class:`ToolSpec` record keyed by name. Registering a
spec hands the handler to FastMCP, which owns the protocol side (listing,
schema validation, dispatch), and keeps the record around so the HTTP layer
can validate arguments and enumerate tools without reaching into FastMCP.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, ConfigDict

from ..core.config import get_settings
from ..core.exceptions import DuplicateToolError, UnknownToolError
from ..core.logging_config import get_logger

logger = get_logger(__name__)

mcp = FastMCP(name=get_settings().mcp_server_name)

ToolHandler = Callable[..., Awaitable[Any]]


class NoArguments(BaseModel):
    """Input model for tools that accept no parameters."""

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Name, description, input model and async handler of one tool."""

    name: str
    description: str
    handler: ToolHandler
    arguments: type[BaseModel] = NoArguments

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.arguments.model_json_schema()


TOOL_SPECS: dict[str, ToolSpec] = {}


def register_tool(spec: ToolSpec) -> ToolSpec:
    """Add ``spec`` to the registry and to the FastMCP server."""

    if spec.name in TOOL_SPECS:
        raise DuplicateToolError(f"Tool {spec.name!r} is already registered")

    mcp.tool(spec.handler, name=spec.name, description=spec.description)
    TOOL_SPECS[spec.name] = spec
    logger.info("mcp_tool_registered", name=spec.name, arguments=spec.arguments.__name__)
    return spec


def tool(
    name: str,
    description: str,
    arguments: type[BaseModel] = NoArguments,
) -> Callable[[ToolHandler], ToolHandler]:
    """Decorator form of :func:`register_tool`; returns the handler unchanged."""

    def decorator(handler: ToolHandler) -> ToolHandler:
        register_tool(
            ToolSpec(name=name, description=description, handler=handler, arguments=arguments)
        )
        return handler

    return decorator


def get_tool_spec(name: str) -> ToolSpec:
    try:
        return TOOL_SPECS[name]
    except KeyError:
        raise UnknownToolError(f"Unknown tool: {name}") from None
