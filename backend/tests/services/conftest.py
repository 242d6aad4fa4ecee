"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app under test is built by create_app() with its own Settings and
      gets the test DatabaseSessionManager on app.state (lifespan not run)
    - fake_repository is a dict-backed ModelRepository for service unit tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import DatabaseSessionManager
from app.main import create_app
from tests.services.fake_repository import FakeModelRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    return Settings(
        database_url=TEST_DATABASE_URL,
        seed_demo_data=False,
        log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def test_app(test_settings, db_manager):
    application = create_app(test_settings)
    application.state.db_manager = db_manager
    return application


@pytest.fixture
async def client(test_app):
    """FastAPI test client bound to the test database."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def fake_repository():
    return FakeModelRepository()
