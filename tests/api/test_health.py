import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from enrollments_service.api.main import create_app
from enrollments_service.boundary.db import get_async_db


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(app, client):
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")

    async def override_db():
        async with AsyncSession(engine) as session:
            yield session

    app.dependency_overrides[get_async_db] = override_db

    response = client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


def test_health_check_db_unreachable(app, client):
    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")
    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Database unreachable"}
