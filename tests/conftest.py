"""
Shared test fixtures and configuration for entire test suite.

Provides: storage mocks, in-memory SQLite storage with all tables created,
seed helpers, and a fresh entity registry per test.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Any, Iterable
from unittest.mock import AsyncMock

import pytest

from astrogrid.boundary.db import statements
from astrogrid.boundary.db.registry import EntityRegistry, get_registry
from astrogrid.boundary.db.storage.base import WriteResult
from astrogrid.configs import get_settings


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Reset lru_cached settings and registry between tests."""
    get_settings.cache_clear()
    get_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_registry.cache_clear()


@pytest.fixture
def mock_storage() -> AsyncMock:
    """
    Provide a mock Storage whose execute() returns no rows by default.

    Returns:
        AsyncMock: Storage double with execute/ping/close coroutines
    """
    storage = AsyncMock()
    storage.execute = AsyncMock(return_value=[])
    storage.ping = AsyncMock(return_value=True)
    storage.close = AsyncMock()
    return storage


@pytest.fixture
def registry() -> EntityRegistry:
    """Provide a registry with the default (WARN) unknown-collection policy."""
    return EntityRegistry()


@pytest.fixture
async def sql_storage():
    """
    Create SqlStorage over an in-memory SQLite database with all tables.

    Yields:
        SqlStorage: Storage handle (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from astrogrid.boundary.db.create_tables import create_all_tables, drop_all_tables
    from astrogrid.boundary.db.storage.sql_storage import SqlStorage

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    storage = SqlStorage(engine)
    yield storage

    await drop_all_tables(engine)
    await storage.close()


@pytest.fixture
def seed(sql_storage):
    """
    Provide a coroutine inserting rows straight into a table.

    Returns:
        Callable: async seed(table, rows) -> list of assigned ids
    """

    async def _seed(table: str, rows: Iterable[dict[str, Any]]) -> list[int]:
        ids = []
        for row in rows:
            stmt = statements.insert(table, row)
            result = await sql_storage.execute(stmt.sql, stmt.params)
            assert isinstance(result, WriteResult)
            ids.append(result.insert_id)
        return ids

    return _seed
