import sys

from time_mcp.core.config import ServerSettings
from time_mcp.core.logging_config import _console_stream, _plain_text_renderer


def test_stdio_transport_logs_to_stderr():
    settings = ServerSettings(_env_file=None, mcp_transport="stdio")

    assert _console_stream(settings) is sys.stderr


def test_http_transport_logs_to_stdout():
    settings = ServerSettings(_env_file=None, mcp_transport="http")

    assert _console_stream(settings) is sys.stdout


def test_plain_text_renderer_formats_event_and_extras():
    line = _plain_text_renderer(
        None,
        "info",
        {
            "timestamp": "2024-01-15T10:30:00Z",
            "level": "info",
            "event": "mcp_tool_call_completed",
            "name": "time_now",
            "call_id": None,
        },
    )

    assert line == "2024-01-15T10:30:00Z [INFO] mcp_tool_call_completed name=time_now"
