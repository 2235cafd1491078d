"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient
from unittest.mock import AsyncMock, patch


class TestHealthEndpoints:
    """Tests for health check routes."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_health_live_endpoint(self, client: AsyncClient):
        response = await client.get("/health/live")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"alive": True}

    @pytest.mark.asyncio
    async def test_health_ready_endpoint(self, client: AsyncClient):
        response = await client.get("/health/ready")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"database": True}

    @pytest.mark.asyncio
    async def test_health_ready_degraded_without_database(self, client: AsyncClient):
        with patch(
            "catalog_admin.api.routes.health.verify_db_connection",
            AsyncMock(return_value=False),
        ):
            response = await client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "degraded"


@pytest.mark.asyncio
async def test_root_redirects_to_products(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 303
    assert response.headers["location"] == "/products"


@pytest.mark.asyncio
async def test_unknown_route_renders_not_found_page(client: AsyncClient):
    response = await client.get("/nowhere")

    assert response.status_code == 404
    assert "Not found" in response.text
