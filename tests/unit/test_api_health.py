import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_root_greets(async_client: AsyncClient) -> None:
    response = await async_client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello World!"


async def test_health_endpoint_returns_service_metadata(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["service"]
    # Status can be "ok" or "degraded" depending on datastore availability
    assert payload["status"] in ["ok", "degraded"]
    assert "mongo" in payload["datastores"]


async def test_responses_carry_request_id(async_client: AsyncClient) -> None:
    response = await async_client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
