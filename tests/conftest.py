import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from database import Database
from main import create_app
from settings import Settings
from tests.helpers import registration_payload

TEST_SECRET = "test-secret-key-for-zen-social"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        _env_file=None,
    )


@pytest.fixture
def database(settings):
    """One in-memory SQLite database shared by every connection of a test."""
    db = Database(
        settings.sqlalchemy_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return ``(user, headers)`` for authenticated calls."""

    def _register(**overrides):
        response = client.post("/api/auth/register", json=registration_payload(**overrides))
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _register
