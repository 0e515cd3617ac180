import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0


@pytest.mark.asyncio
async def test_health_ignores_role_header() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/health", headers={"x-role": "intruder"})
        head = await client.head("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert head.status_code == 200


@pytest.mark.asyncio
async def test_cors_preflight_allows_any_origin() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.options(
            "/api/properties",
            headers={
                "Origin": "http://dashboard.example",
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "x-role",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {"*", "http://dashboard.example"}
