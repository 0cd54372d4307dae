"""Shared pytest fixtures for Placebook tests."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from placebook import models  # noqa: F401
from placebook.core.config import Settings
from placebook.db.session import Database
from placebook.main import create_app

MEMORY_DB = "sqlite+aiosqlite://"


@pytest.fixture
def settings():
    """Settings pointing at a private in-memory database."""
    return Settings(_env_file=None, database_url=MEMORY_DB, log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the application lifespan (table creation) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session():
    """Async session on a fresh in-memory database for service tests."""
    database = Database(MEMORY_DB)
    await database.create_all()
    async with database.session() as db_session:
        yield db_session
    await database.dispose()


@pytest.fixture
def signup(client):
    """Register a user through the API and return the public projection."""

    def _signup(username, password):
        response = client.post("/signup", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        return response.json()["response"]

    return _signup


@pytest.fixture
def alice(signup):
    return signup("alice", "password1")


@pytest.fixture
def bob(signup):
    return signup("bob", "password2")
