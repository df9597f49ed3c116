import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from time_mcp.mcp.tools import clock
from time_mcp.mcp.tools.clock import TIME_PREFIX, format_istanbul_time, time_now

TR_TIMESTAMP = re.compile(r"(\d{2})\.(\d{2})\.(\d{4}) (\d{2}):(\d{2}):(\d{2})")


def test_format_known_instant():
    instant = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

    assert format_istanbul_time(instant) == "15.01.2024 13:30:00"


def test_format_treats_naive_datetime_as_utc():
    assert format_istanbul_time(datetime(2024, 1, 15, 10, 30, 0)) == "15.01.2024 13:30:00"


def test_format_has_no_daylight_saving_shift():
    summer = datetime(2024, 7, 1, 21, 5, 9, tzinfo=timezone.utc)

    assert format_istanbul_time(summer) == "02.07.2024 00:05:09"


def test_format_converts_from_other_offsets():
    new_york = datetime(2023, 12, 31, 19, 0, 0, tzinfo=ZoneInfo("America/New_York"))

    assert format_istanbul_time(new_york) == "01.01.2024 03:00:00"


@pytest.mark.asyncio
async def test_time_now_returns_single_text_block(monkeypatch):
    monkeypatch.setattr(
        clock, "_utcnow", lambda: datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    )

    blocks = await time_now()

    assert len(blocks) == 1
    assert blocks[0].type == "text"
    assert blocks[0].text == "Şu an İstanbul saatiyle: 15.01.2024 13:30:00"


@pytest.mark.asyncio
async def test_time_now_is_close_to_wall_clock():
    before = datetime.now(tz=timezone.utc)
    blocks = await time_now()

    text = blocks[0].text
    assert text.startswith(TIME_PREFIX)
    match = TR_TIMESTAMP.search(text)
    assert match is not None

    day, month, year, hour, minute, second = (int(part) for part in match.groups())
    shown = datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo("Europe/Istanbul"))
    assert abs(shown - before) <= timedelta(seconds=2)


@pytest.mark.asyncio
async def test_time_now_advances_with_the_clock(monkeypatch):
    instants = iter(
        [
            datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc),
            datetime(2024, 1, 15, 10, 30, 1, tzinfo=timezone.utc),
        ]
    )
    monkeypatch.setattr(clock, "_utcnow", lambda: next(instants))

    first = (await time_now())[0].text
    second = (await time_now())[0].text

    assert first != second
    assert second.endswith("13:30:01")
