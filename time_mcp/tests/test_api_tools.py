from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from time_mcp.mcp.server import refresh_tools_schema
from time_mcp.mcp.tools import clock
from time_mcp.service.main import app


@pytest_asyncio.fixture
async def client():
    # ASGITransport skips the lifespan, so prime the schema cache here.
    await refresh_tools_schema()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_health_reports_registered_tools(client):
    response = await client.get("/health/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["tools"] >= 1


@pytest.mark.asyncio
async def test_index_points_at_mcp_endpoint(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["mcp_endpoint"] == "/api/mcp"


@pytest.mark.asyncio
async def test_list_tools_endpoint(client):
    response = await client.get("/tools/")

    assert response.status_code == 200
    names = [entry["function"]["name"] for entry in response.json()]
    assert "time_now" in names


@pytest.mark.asyncio
async def test_invoke_time_now(client, monkeypatch):
    monkeypatch.setattr(
        clock, "_utcnow", lambda: datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    )

    response = await client.post("/tools/time_now", json={})

    assert response.status_code == 200
    payload = response.json()
    assert payload["tool"] == "time_now"
    assert payload["call_id"]
    assert payload["result"] == {
        "content": [{"type": "text", "text": "Şu an İstanbul saatiyle: 15.01.2024 13:30:00"}]
    }


@pytest.mark.asyncio
async def test_invoke_without_body(client):
    response = await client.post("/tools/time_now")

    assert response.status_code == 200
    assert len(response.json()["result"]["content"]) == 1


@pytest.mark.asyncio
async def test_invoke_with_arguments_is_rejected(client):
    response = await client.post("/tools/time_now", json={"timezone": "UTC"})

    assert response.status_code == 422
    assert response.json()["detail"][0]["type"] == "extra_forbidden"


@pytest.mark.asyncio
async def test_invoke_unknown_tool(client):
    response = await client.post("/tools/weather_now", json={})

    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown tool: weather_now"


@pytest.mark.asyncio
async def test_invoke_reports_clock_failure_as_generic_error(client, monkeypatch):
    def broken_clock():
        raise OSError("clock unavailable")

    monkeypatch.setattr(clock, "_utcnow", broken_clock)

    response = await client.post("/tools/time_now", json={})

    assert response.status_code == 500
    assert response.json() == {"detail": "Tool invocation failed"}
