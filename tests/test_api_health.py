"""Tests for health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from forestshare.config import settings
from forestshare.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    async def test_health_reports_app_version(self, client: AsyncClient) -> None:
        """Health includes the version stamped onto exports."""
        response = await client.get("/health")

        assert response.json()["app_version"] == settings.app_version
