"""Shared fixtures: in-memory SQLite database and an ASGI test client."""

import pytest
from httpx import ASGITransport, AsyncClient

from person_registry.main import create_app
from person_registry.settings import Settings
from person_registry.stores.database import Database

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def database():
    """Fresh in-memory database with the schema created."""
    db = Database(TEST_DATABASE_URL)
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.dispose()


@pytest.fixture
async def client(database: Database):
    """Create test client bound to the test database.

    ASGITransport does not run the lifespan, so the handle is attached directly.
    """
    app = create_app(Settings(database_url=TEST_DATABASE_URL))
    app.state.database = database
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
