"""Test health check endpoint and app wiring."""

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health_check():
    """Test that /health returns 200 with status ok."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_quiz_routes_mounted_under_api_prefix():
    """Quiz routes live under /api, not at the root."""
    paths = set(app.openapi()["paths"])
    assert {"/api/quiz/items", "/api/quiz/assess", "/api/quiz/report"} <= paths
    assert client.get("/api/quiz/items").status_code == 200
    assert client.get("/quiz/items").status_code == 404
