"""Tests for health check endpoints."""

from unittest.mock import MagicMock

from api.dependencies import get_document_store


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Welcome to BMS-hub Apartment Server!"

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_readiness_check(self, client):
        """Readiness should report the store as connected."""
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}

    def test_readiness_store_down(self, app, client):
        """Readiness should return 503 when the store doesn't answer."""
        store = MagicMock()
        store.ping.return_value = False
        app.dependency_overrides[get_document_store] = lambda: store

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["database"] == "unreachable"
