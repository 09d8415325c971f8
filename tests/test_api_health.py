"""Tests for health check endpoints."""

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient

from magedeck.db.store import CatalogStore, get_store
from magedeck.main import app
from magedeck.models.failure import StorageError


async def _get(store: object, path: str):
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(path)

    app.dependency_overrides.clear()
    return response


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, store: CatalogStore) -> None:
        """Liveness probe returns healthy."""
        response = await _get(store, "/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data.get("catalog") is None


class TestReadyEndpoint:
    async def test_ready_with_synced_catalog(self, seeded_store: CatalogStore) -> None:
        response = await _get(seeded_store, "/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["catalog"] == "synced"
        assert data["cards"] == 7

    async def test_ready_with_empty_catalog(self, store: CatalogStore) -> None:
        response = await _get(store, "/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["catalog"] == "empty"
        assert data["cards"] == 0

    async def test_ready_returns_503_on_storage_failure(self) -> None:
        broken = AsyncMock()
        broken.count.side_effect = StorageError("Failed to query catalog")

        response = await _get(broken, "/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["catalog"] == "unavailable"
