"""Run the Istanbul time MCP server.

``MCP_TRANSPORT=http`` (the default) serves the FastAPI app with uvicorn, with
auto-reload while ``APP_ENV=development``. ``MCP_TRANSPORT=stdio`` speaks MCP
over stdin/stdout for desktop clients and editor integrations.
"""

from __future__ import annotations


def run_http() -> None:
    import uvicorn

    from time_mcp.core.config import get_settings
    from time_mcp.service.main import app

    settings = get_settings()
    reload_enabled = settings.app_env == "development"
    if reload_enabled:
        uvicorn.run(
            "time_mcp.service.main:app",
            host=settings.server_host,
            port=settings.server_port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
    else:
        uvicorn.run(
            app,
            host=settings.server_host,
            port=settings.server_port,
            log_level=settings.log_level.lower(),
            reload=False,
        )


def run_stdio() -> None:
    from time_mcp.core.logging_config import get_logger
    from time_mcp.mcp.registry import mcp
    from time_mcp.mcp import tools  # noqa: F401

    get_logger(__name__).info("server_startup", transport="stdio", server=mcp.name)
    mcp.run(transport="stdio")


def main() -> None:
    from time_mcp.core.config import get_settings

    if get_settings().mcp_transport == "stdio":
        run_stdio()
    else:
        run_http()


if __name__ == "__main__":
    main()
