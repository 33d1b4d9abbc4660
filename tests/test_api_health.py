"""Tests for health endpoints."""

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from duelcatalog.db.database import get_session
from duelcatalog.main import app


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cards": None}


class TestReady:
    async def test_ready_counts_cards(self, client: AsyncClient) -> None:
        await client.put("/card/list/json", json=[{"name": "Aqua Hulcus"}])

        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "cards": 1}

    async def test_ready_on_empty_store(self, client: AsyncClient) -> None:
        """An empty catalog is ready and reports zero cards."""
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "cards": 0}

    async def test_not_ready_when_store_fails(self) -> None:
        failing_session = AsyncMock()
        failing_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        async def override_get_session():
            yield failing_session

        app.dependency_overrides[get_session] = override_get_session
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/ready")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json()["status"] == "not ready"
