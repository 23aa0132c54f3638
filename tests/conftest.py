"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the record store (mocked and
SQLite-backed), the author controller and HTTP clients.
"""

import os
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Set environment variables for testing before importing catalog modules
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_PATH", "logs/test_errors.log")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from catalog.controllers.author_controller import AuthorController  # noqa: E402
from catalog.models.author import Author  # noqa: E402
from catalog.schemas.lookup import Missing  # noqa: E402
from catalog.storage.db import (  # noqa: E402
    build_engine,
    build_session_factory,
    init_db,
)
from catalog.storage.store import CatalogStore  # noqa: E402


@pytest.fixture
def jane_austen():
    """
    Provides a stored author record.

    Returns:
        Author: Jane Austen with id 1
    """
    return Author(
        id=1,
        first_name="Jane",
        family_name="Austen",
        date_of_birth=date(1775, 12, 16),
        date_of_death=date(1817, 7, 18),
    )


@pytest.fixture
def mock_store():
    """
    Provides a mock record store with empty defaults.

    Returns:
        AsyncMock: Mocked CatalogStore instance
    """
    store = AsyncMock(spec=CatalogStore)
    store.find_sorted = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=Missing)
    store.find_projected = AsyncMock(return_value=[])
    store.find_books = AsyncMock(return_value=[])
    store.insert = AsyncMock()
    store.update_by_id = AsyncMock()
    store.delete_by_id = AsyncMock(return_value=None)
    return store


@pytest.fixture
def recorder():
    """
    Provides a mock event recorder.

    Returns:
        MagicMock: Recorder whose record() calls can be inspected
    """
    return MagicMock()


@pytest.fixture
def controller(mock_store, recorder):
    """
    Provides an AuthorController over the mock store.

    Returns:
        AuthorController: Controller with strict delete id checking
    """
    return AuthorController(mock_store, recorder, strict_delete_id_check=True)


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """
    Provides an engine on a fresh SQLite file with the tables created.

    A file database (not :memory:) lets several sessions, and therefore
    concurrent store calls, see the same data.

    Yields:
        AsyncEngine: Engine bound to the temporary database
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(sqlite_engine):
    """
    Provides a CatalogStore on the temporary SQLite database.

    Returns:
        CatalogStore: Store with its own session factory
    """
    return CatalogStore(build_session_factory(sqlite_engine))
