"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ...core.config import get_settings
from ...mcp.registry import TOOL_SPECS

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> dict[str, str | int]:
    return {
        "status": "ok",
        "server": get_settings().mcp_server_name,
        "tools": len(TOOL_SPECS),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
