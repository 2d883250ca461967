"""
Tests for the health check and root endpoints.
"""

from datetime import datetime

from fastapi.testclient import TestClient

from api.main import API_NAME, API_VERSION, app

client = TestClient(app)


def test_health_endpoint_ok():
    """Test that /health answers with the envelope and an ISO-8601 timestamp."""
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()

    assert data["success"] is True
    assert data["message"] == "Recipe Book API is running"
    # Raises if the timestamp is not ISO-8601
    parsed = datetime.fromisoformat(data["timestamp"])
    assert parsed.tzinfo is not None


def test_root_endpoint():
    """Test that / describes the API and points at the docs."""
    resp = client.get("/")
    assert resp.status_code == 200
    data = resp.json()

    assert data["name"] == API_NAME == "Recipe Book API"
    assert data["version"] == API_VERSION
    assert data["docs"] == "/docs"


def test_cors_allows_frontend_origin():
    """Test that the default Streamlit origin may call the API."""
    resp = client.options(
        "/health",
        headers={"Origin": "http://localhost:8501", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:8501"
