"""
Tests for application-level endpoints and the app factory.
"""
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.core.exceptions import ConfigurationError
from app.main import create_app


def test_root_endpoint(client):
    """Test the root endpoint returns correct response."""
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert "message" in data
    assert data["version"] == "1.0.0"


def test_health_check_endpoint(client):
    """Test the health check endpoint."""
    response = client.get("/api/v1/health")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["components"]["turnstile"]["status"] == "configured"
    assert "test-secret-key" not in response.text


def test_liveness_endpoint(client):
    response = client.get("/api/v1/health/live")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "alive"}


def test_unknown_route_returns_json_error(client):
    """Test 404s use the {"error": ...} body shape."""
    response = client.get("/does-not-exist", headers={"Origin": "https://www.example.com"})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Not Found"}
    assert response.headers["access-control-allow-origin"] == "https://www.example.com"


def test_app_uses_given_settings(contact_settings):
    """Test the factory keeps the settings it was given."""
    app = create_app(contact_settings)
    assert app.state.contact_settings is contact_settings


def test_app_startup_runs_lifespan(app):
    """Test the app starts and stops cleanly."""
    with TestClient(app) as client:
        assert client.get("/api/v1/health/live").status_code == status.HTTP_200_OK


def test_create_app_without_environment_fails(monkeypatch):
    """Test an incomplete environment is rejected when the app is built."""
    monkeypatch.delenv("TURNSTILE_SECRET_KEY", raising=False)
    monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)

    with pytest.raises(ConfigurationError):
        create_app()
