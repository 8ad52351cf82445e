# Basic tests
from fastapi.testclient import TestClient

from noteful.main import app

client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Noteful API"}


def test_health_endpoint():
    """Test health check."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_models_import():
    """Test that models can be imported."""
    from noteful.core.models.folder import Folder
    from noteful.core.models.note import Note

    assert Folder.__tablename__ == "noteful_folders"
    assert Note.__tablename__ == "noteful_notes"


async def test_api_health_needs_no_token(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["database"]["connected"] is True


async def test_api_database_health(client):
    response = await client.get("/api/health/database")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_collection_routes_have_no_trailing_slash(client, auth_headers):
    response = await client.get("/api/folders/", headers=auth_headers)
    assert response.status_code == 307


async def test_api_health_reports_503_when_database_is_down(client, test_app):
    from sqlalchemy.exc import OperationalError

    from noteful.api.health import get_health_service
    from noteful.core.services import HealthService

    class DownSession:
        async def execute(self, stmt):
            raise OperationalError("SELECT 1", {}, Exception("db down"))

    test_app.dependency_overrides[get_health_service] = lambda: HealthService(DownSession())
    response = await client.get("/api/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
