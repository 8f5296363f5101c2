"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

# Settings are validated when the app module is imported, so these must be set first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-bookmarks-api-suite")

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from db.session import Database  # noqa: E402


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database]:
    """Create a throw-away SQLite database with all tables for one test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'bookmarks.db'}")
    await db.create_all()

    yield db

    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Create an async session on the test database for service-level tests."""
    async with database.session_factory() as session:
        yield session


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """
    Create a test client for the application bound to the test database.

    The ASGI transport doesn't run the lifespan, so the database is attached
    to the app state directly.
    """
    from core.config import get_settings

    get_settings.cache_clear()

    from api.main import app

    app.state.database = database

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.state.database = None
    app.dependency_overrides.clear()
