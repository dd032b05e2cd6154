"""Health check, correlation IDs, error envelope and API docs."""

from __future__ import annotations

import json
import logging
import uuid
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.test import RequestFactory

from modules.core.views import server_error

pytestmark = pytest.mark.integration


class TestHealthCheck:
    def test_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"]["status"] == "up"
        assert "timestamp" in data

    def test_database_down(self, client):
        with patch("modules.core.views.connections") as mock_connections:
            conn = mock_connections.__getitem__.return_value
            conn.ensure_connection.side_effect = DatabaseError("connection refused")
            response = client.get("/health")
        assert response.status_code == 503
        assert response.json()["services"]["database"] == {"status": "down"}

    def test_no_token_required(self, api_client):
        assert api_client.get("/health").status_code == 200


class TestCorrelationId:
    def test_returns_provided_request_id(self, client):
        response = client.get("/health", HTTP_X_REQUEST_ID="my-request-123")
        assert response["X-Request-ID"] == "my-request-123"

    def test_generates_uuid_when_missing(self, client):
        request_id = client.get("/health")["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_present_on_error_responses(self, api_client):
        response = api_client.get("/api/updates", HTTP_X_REQUEST_ID="err-req-1")
        assert response.status_code == 401
        assert response["X-Request-ID"] == "err-req-1"

    def test_correlation_id_in_logs(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID="log-test-456")
        assert any("log-test-456" in record.getMessage() for record in caplog.records)


class TestErrorEnvelope:
    def test_unexpected_error_uses_action_message(self, api_client):
        with patch(
            "modules.products.views.ProductService.list_products",
            side_effect=RuntimeError("database exploded"),
        ):
            response = api_client.get("/api/product")
        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching products"}

    def test_unknown_route_answers_json(self, api_client):
        response = api_client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response["Content-Type"] == "application/json"
        assert response.json() == {"error": "Record not found"}

    def test_server_error_handler_answers_json(self):
        response = server_error(RequestFactory().get("/api/product"))
        assert response.status_code == 500
        assert json.loads(response.content) == {"error": "Internal server error"}

    def test_method_not_allowed(self, alice_client):
        response = alice_client.delete("/api/product")
        assert response.status_code == 405
        assert "error" in response.json()


class TestApiDocs:
    def test_schema_is_public(self, api_client):
        response = api_client.get("/api/schema")
        assert response.status_code == 200
