"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from ..core.config import env_file_candidates, get_settings, resolved_env_file
from ..core.logging_config import configure_logging, get_logger
from ..mcp.registry import mcp
from ..mcp.server import refresh_tools_schema
from .api.health import router as health_router
from .api.tools import router as tools_router

configure_logging()
logger = get_logger(__name__)

settings = get_settings()
mcp_app = mcp.http_app(
    path="/mcp",
    stateless_http=settings.mcp_stateless_http,
    json_response=settings.mcp_json_response,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler; also drives the MCP session manager."""

    logger.info(
        "server_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        host=settings.server_host,
        port=settings.server_port,
        mcp_endpoint=f"{settings.mcp_base_path}/mcp",
    )
    logger.info(
        "environment_loaded",
        log_file=settings.log_file or "console-only",
        env_file=resolved_env_file() or "not-found",
        env_candidates=list(env_file_candidates()),
    )
    await refresh_tools_schema()
    async with mcp_app.lifespan(app):
        logger.info("mcp_transport_ready")
        yield
    logger.info("server_shutdown")


app = FastAPI(
    title="Istanbul Time MCP",
    version="0.1.0",
    description="MCP server exposing the current Istanbul time.",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_incoming_requests(request: Request, call_next):
    logger.info(
        "http_request_received",
        method=request.method,
        path=request.url.path,
        client=str(request.client[0]) if request.client else "unknown",
    )
    response = await call_next(request)
    logger.info(
        "http_request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response

app.include_router(health_router)
app.include_router(tools_router)


@app.get("/")
async def index() -> dict[str, str]:
    return {
        "service": settings.mcp_server_name,
        "status": "ok",
        "mcp_endpoint": f"{settings.mcp_base_path}/mcp",
    }


# Mounted last so the routes above take precedence over the MCP sub-app.
app.mount(settings.mcp_base_path or "/", mcp_app)
