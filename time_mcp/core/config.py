"""Configuration management for the time MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo root .env wins, then the package directory, then the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class ServerSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Log file path; leave empty to log to the console only",
    )

    server_host: str = Field("0.0.0.0", description="HTTP bind host")
    server_port: int = Field(3000, description="HTTP bind port")

    mcp_server_name: str = Field("istanbul-time", description="Name advertised to MCP clients")
    mcp_base_path: str = Field("/api", description="Mount point of the MCP transport")
    mcp_transport: Literal["http", "stdio"] = Field(
        "http", description="Serve MCP over Streamable HTTP or stdio"
    )
    mcp_stateless_http: bool = Field(
        False, description="Run the Streamable HTTP transport without server-side sessions"
    )
    mcp_json_response: bool = Field(
        True, description="Answer Streamable HTTP POSTs with JSON instead of an SSE stream"
    )

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("mcp_base_path")
    @classmethod
    def _normalise_base_path(cls, value: str) -> str:
        path = "/" + value.strip().strip("/")
        return path if path != "/" else ""


@lru_cache
def get_settings() -> ServerSettings:
    """Return a cached ServerSettings instance."""

    return ServerSettings()


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
