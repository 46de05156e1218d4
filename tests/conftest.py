"""
Pytest configuration and fixtures.
Provides an in-memory database, the test app client and entity factories.
"""

import os

# Settings are read at import time
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from bizdesk.db.session import Database
from bizdesk.deps.di_container import Container
from bizdesk.main import create_app


@pytest.fixture(scope="function")
async def database():
    """
    Create a test database.
    Uses in-memory SQLite for fast tests.
    """
    db = Database(TEST_DATABASE_URL)
    await db.create_tables()

    yield db

    # Cleanup
    await db.drop_tables()
    await db.dispose()


@pytest.fixture(scope="function")
async def db_session(database):
    async with database.session_maker() as session:
        yield session


@pytest.fixture(scope="function")
def app(database):
    """
    Create the application bound to the test database.
    The lifespan does not run, so state is set here.
    """
    application = create_app()
    container = Container()
    container.database.override(providers.Object(database))
    application.state.container = container
    application.state.database = database
    return application


@pytest.fixture(scope="function")
async def test_client(app):
    """
    Create a test HTTP client.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_client(test_client):
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        payload = {
            "company_name": f"Company {counter['n']}",
            "contact_person": "Jane Smith",
            "email": f"contact{counter['n']}@example.com",
        }
        payload.update(overrides)
        response = await test_client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_user(test_client):
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        payload = {"name": f"User {counter['n']}", "email": f"user{counter['n']}@example.com"}
        payload.update(overrides)
        response = await test_client.post("/api/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_project(test_client):
    async def _make(client_id, **overrides):
        payload = {"title": "Website", "client_id": client_id}
        payload.update(overrides)
        response = await test_client.post("/api/projects", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_task(test_client):
    async def _make(project, **overrides):
        payload = {
            "title": "Build landing page",
            "project_id": project["id"],
            "client_id": project["client_id"],
            "status": "pending",
            "priority": "medium",
            "due_date": "2030-01-31",
        }
        payload.update(overrides)
        response = await test_client.post("/api/tasks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_transaction(test_client):
    async def _make(project_id, **overrides):
        payload = {
            "type": "payment",
            "amount": 100.0,
            "description": "Deposit",
            "project_id": project_id,
        }
        payload.update(overrides)
        response = await test_client.post("/api/finance/transactions", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
