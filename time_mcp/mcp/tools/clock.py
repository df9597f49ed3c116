"""Clock MCP tools."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from mcp.types import TextContent

from ..registry import tool

TIMEZONE_NAME = "Europe/Istanbul"
# tr-TR renders day, month and year with dots and a 24-hour clock.
TR_DATETIME_FORMAT = "%d.%m.%Y %H:%M:%S"
TIME_PREFIX = "Şu an İstanbul saatiyle: "


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def format_istanbul_time(instant: datetime) -> str:
    """Format ``instant`` as Istanbul wall-clock time in the tr-TR style.

    Naive datetimes are taken to be UTC.
    """

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    local = instant.astimezone(ZoneInfo(TIMEZONE_NAME))
    return local.strftime(TR_DATETIME_FORMAT)


@tool(
    name="time_now",
    description="Returns the current time in Istanbul (Europe/Istanbul timezone)",
)
async def time_now() -> list[TextContent]:
    """
    Return the current Istanbul time as a single Turkish sentence.

    No parameters. Example output: ``Şu an İstanbul saatiyle: 15.01.2024 13:30:00``.
    """

    timestamp = format_istanbul_time(_utcnow())
    return [TextContent(type="text", text=f"{TIME_PREFIX}{timestamp}")]
