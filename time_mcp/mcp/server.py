"""FastMCP server configuration and dispatch helpers."""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from fastmcp.exceptions import NotFoundError
from fastmcp.tools.tool import ToolResult
from pydantic import ValidationError

from ..core.exceptions import ToolArgumentsError, UnknownToolError
from ..core.logging_config import get_logger
from ..core.types import TextContentBlock, ToolCallTrace, ToolInvocationResult
from .registry import TOOL_SPECS, get_tool_spec, mcp

# Import tool modules so decorators run at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)

_TOOLS_SCHEMA: list[dict[str, Any]] | None = None


def get_tools_schema() -> list[dict[str, Any]]:
    """Expose cached MCP tool schema."""

    if _TOOLS_SCHEMA is None:
        raise RuntimeError("MCP tools schema has not been initialised")
    return _TOOLS_SCHEMA


async def refresh_tools_schema() -> list[dict[str, Any]]:
    """Regenerate and cache tool schema."""

    global _TOOLS_SCHEMA
    tools = await mcp.get_tools()
    schema: list[dict[str, Any]] = []

    for tool in tools.values():
        # Only registry-backed tools can be invoked through call_tool.
        if not tool.enabled or tool.name not in TOOL_SPECS:
            continue

        mcp_tool = tool.to_mcp_tool()
        parameters = mcp_tool.inputSchema or {"type": "object", "properties": {}}
        schema.append(
            {
                "type": "function",
                "function": {
                    "name": mcp_tool.name,
                    "description": mcp_tool.description or "",
                    "parameters": parameters,
                },
            }
        )

    _TOOLS_SCHEMA = schema
    logger.info("mcp_tools_schema_loaded", count=len(_TOOLS_SCHEMA))
    return _TOOLS_SCHEMA


def validate_arguments(name: str, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Check ``arguments`` against the tool's input model before dispatch."""

    spec = get_tool_spec(name)
    try:
        parsed = spec.arguments.model_validate(dict(arguments))
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        logger.warning("mcp_tool_call_rejected", name=name, errors=errors)
        raise ToolArgumentsError(name, errors) from exc
    return parsed.model_dump()


async def call_tool(name: str, arguments: Mapping[str, Any] | None = None) -> ToolCallTrace:
    """Execute a tool by name with arguments."""

    call_id = str(uuid.uuid4())
    logger.debug("mcp_tool_call", call_id=call_id, name=name, arguments=arguments)
    validated = validate_arguments(name, arguments or {})

    started = time.perf_counter()
    try:
        tool_result = await mcp._tool_manager.call_tool(name, validated)
    except NotFoundError as exc:  # pragma: no cover - registry and FastMCP agree on names
        raise UnknownToolError(f"Unknown tool: {name}") from exc
    latency_ms = (time.perf_counter() - started) * 1000

    result = _serialize_tool_result(tool_result)
    logger.info(
        "mcp_tool_call_completed",
        call_id=call_id,
        name=name,
        blocks=len(result.content),
        latency_ms=round(latency_ms, 3),
    )
    return ToolCallTrace(
        call_id=call_id,
        name=name,
        arguments=validated,
        result=result,
        latency_ms=latency_ms,
        timestamp=datetime.now(tz=timezone.utc),
    )


def _serialize_tool_result(tool_result: ToolResult) -> ToolInvocationResult:
    """Convert FastMCP ToolResult into text content blocks."""

    blocks: list[TextContentBlock] = []
    for block in tool_result.content:
        text = getattr(block, "text", None)
        if text is None:  # pragma: no cover - only text tools are registered
            text = block.model_dump_json(exclude_none=True)
        blocks.append(TextContentBlock(text=text))
    return ToolInvocationResult(content=blocks)
