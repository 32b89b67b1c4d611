"""Tests for the API exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from api.exceptions import setup_exception_handlers
from shared.exceptions import ConflictError, ExternalServiceError, NotFoundError


class Body(BaseModel):
    count: int


@pytest.fixture
def client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Thing not found", code="THING_NOT_FOUND", details={"id": "1"})

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Already there")

    @app.get("/upstream")
    async def upstream():
        raise ExternalServiceError("Store unavailable", service="document_store")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    @app.post("/typed")
    async def typed(body: Body):
        return body

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    def test_domain_error_envelope(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Thing not found",
            "error": "THING_NOT_FOUND",
            "details": {"id": "1"},
        }

    def test_conflict(self, client):
        response = client.get("/conflict")
        assert response.status_code == 409
        assert response.json()["error"] == "ConflictError"

    def test_external_service_error_is_500(self, client):
        response = client.get("/upstream")
        assert response.status_code == 500
        assert response.json()["details"]["service"] == "document_store"

    def test_unhandled_error_is_generic_500(self, client):
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json()["message"] == "Server error"
        assert "boom" not in response.text

    def test_request_validation_is_400(self, client):
        response = client.post("/typed", json={"count": "many"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["errors"][0]["loc"] == ["body", "count"]
        assert body["message"].startswith("body.count: ")
