from fastapi.testclient import TestClient
from form_import.main import app


def test_health_ok():
    """Test health check endpoint pings the form store"""
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] == "ok"


def test_root_endpoint():
    """Test root endpoint"""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Form Import Service"
    assert data["status"] == "ok"
    assert data["import"] == "/forms/import"
