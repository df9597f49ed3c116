"""JSON routes for listing and invoking MCP tools without an MCP client."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastmcp.exceptions import ToolError

from ...core.exceptions import ToolArgumentsError, UnknownToolError
from ...core.logging_config import get_logger
from ...mcp.server import call_tool, get_tools_schema
from ..schemas.tools import ToolCallResponse, ToolSchemaEntry

router = APIRouter(prefix="/tools", tags=["tools"])
logger = get_logger(__name__)


@router.get("/", response_model=list[ToolSchemaEntry])
async def list_tools() -> list[dict[str, Any]]:
    return get_tools_schema()


@router.post("/{name}", response_model=ToolCallResponse)
async def invoke_tool(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
) -> ToolCallResponse:
    try:
        trace = await call_tool(name, arguments or {})
    except UnknownToolError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ToolArgumentsError as exc:
        raise HTTPException(status_code=422, detail=exc.errors) from exc
    except ToolError as exc:
        logger.exception("tool_invocation_failed", tool=name)
        raise HTTPException(status_code=500, detail="Tool invocation failed") from exc

    return ToolCallResponse(
        tool=trace.name,
        call_id=trace.call_id,
        latency_ms=trace.latency_ms,
        result=trace.result.to_dict(),
    )
