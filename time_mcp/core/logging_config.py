"""Structlog logging configuration with plain-text output."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from .config import ServerSettings, get_settings

_CONFIGURED = False

_SHARED_PROCESSORS: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _plain_text_renderer(_: Any, event_name: str, event_dict: dict[str, Any]) -> str:
    """Render ``2024-01-15T10:30:00Z [INFO] event key=value`` lines."""

    timestamp = event_dict.pop("timestamp", datetime.now(tz=timezone.utc).isoformat())
    level = str(event_dict.pop("level", "info")).upper()
    event = event_dict.pop("event", "") or event_name

    extras = " ".join(f"{key}={value}" for key, value in event_dict.items() if value is not None)
    return " ".join(part for part in (timestamp, f"[{level}]", event, extras) if part)


def _handler(target: TextIO | Path, level: str) -> logging.Handler:
    if isinstance(target, Path):
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(target)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _plain_text_renderer,
            ],
        )
    )
    handler.setLevel(level)
    return handler


def _console_stream(settings: ServerSettings) -> TextIO:
    # stdout carries the protocol frames when serving MCP over stdio.
    return sys.stderr if settings.mcp_transport == "stdio" else sys.stdout


def configure_logging() -> None:
    """Configure application-wide logging."""

    global _CONFIGURED
    if _CONFIGURED and logging.getLogger().handlers:
        return

    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers = [_handler(_console_stream(settings), settings.log_level)]
    log_file = (settings.log_file or "").strip()
    if log_file:
        handlers.append(_handler(Path(log_file), settings.log_level))

    logging.basicConfig(handlers=handlers, level=settings.log_level, format="%(message)s")

    structlog.get_logger(__name__).info(
        "logging_configured",
        level=settings.log_level,
        transport=settings.mcp_transport,
        log_file=log_file or "console-only",
    )

    _CONFIGURED = True


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return a configured structlog logger."""

    configure_logging()
    return structlog.get_logger(*args, **kwargs)
