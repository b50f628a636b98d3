"""Tests for correlation ID middleware."""

import uuid

import pytest

pytestmark = pytest.mark.integration


def test_response_includes_correlation_id_header(api_client):
    response = api_client.get("/api/health")

    correlation_id = response.headers["x-request-id"]
    uuid.UUID(correlation_id)


def test_custom_correlation_id_echoed(api_client):
    response = api_client.get("/api/health", headers={"X-Request-ID": "custom-id-123"})

    assert response.headers["x-request-id"] == "custom-id-123"


def test_different_requests_get_different_ids(api_client):
    first = api_client.get("/api/health").headers["x-request-id"]
    second = api_client.get("/api/health").headers["x-request-id"]

    assert first != second
