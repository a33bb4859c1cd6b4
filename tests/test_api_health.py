"""
Test API health endpoints
"""

import pytest
from httpx import AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from app.core.database import get_database
from app.main import app


class _PingableDatabase:
    def __init__(self, error=None):
        self.error = error

    async def command(self, name):
        if self.error:
            raise self.error
        return {"ok": 1.0}


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient):
    """Test basic health endpoint"""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "timestamp" in data
    assert "version" in data


@pytest.mark.asyncio
async def test_readiness_ok(client: AsyncClient):
    app.dependency_overrides[get_database] = lambda: _PingableDatabase()

    response = await client.get("/api/v1/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"] == {"database": True}


@pytest.mark.asyncio
async def test_readiness_reports_unreachable_database(client: AsyncClient):
    app.dependency_overrides[get_database] = lambda: _PingableDatabase(ServerSelectionTimeoutError("no servers"))

    response = await client.get("/api/v1/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"


@pytest.mark.asyncio
async def test_api_info_endpoint(client: AsyncClient):
    response = await client.get("/api/v1")

    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data


@pytest.mark.asyncio
async def test_root_redirects_to_brand_pages(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 303
    assert response.headers["location"] == "/brands"


@pytest.mark.asyncio
async def test_responses_carry_request_id(client: AsyncClient):
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in response.headers
