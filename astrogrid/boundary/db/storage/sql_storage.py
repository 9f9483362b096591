"""
Relational storage backed by a bounded SQLAlchemy connection pool.

One AsyncEngine is created per process by the hosting application and
passed by reference to every adapter call. Each execute() acquires a
connection, runs one statement, commits, and releases the connection.
Callers beyond pool_size queue for a free connection; with
pool_timeout=None they wait indefinitely.

Dependencies: sqlalchemy[asyncio], aiomysql, astrogrid.configs
System role: Connection pool manager for the document adapter
"""

import logging
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from astrogrid.boundary.db.exceptions import StorageError
from astrogrid.boundary.db.storage.base import Record, WriteResult
from astrogrid.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with a bounded connection pool.

    max_overflow=0 caps concurrent connections at pool_size.
    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    return create_async_engine(
        db_config.database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=0,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def _driver_message(error: SQLAlchemyError) -> str:
    """Driver's own message, without SQLAlchemy's statement echo and links."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


class SqlStorage:
    """
    Storage implementation executing text SQL through an AsyncEngine.

    Attributes:
        engine: The pooled async engine shared by all calls
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """
        Initialize storage around an existing engine.

        Args:
            engine: Async engine owning the connection pool
        """
        self.engine = engine

    @classmethod
    def from_settings(cls, db_config: DatabaseSettings) -> "SqlStorage":
        """Build storage with a fresh engine from settings."""
        logger.info(
            "Creating SQL storage pool",
            extra={"host": db_config.host, "database": db_config.name, "pool_size": db_config.pool_size},
        )
        return cls(get_async_engine(db_config))

    async def execute(
        self,
        sql: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[Record] | WriteResult:
        """
        Execute one parameterized statement on a pooled connection.

        Args:
            sql: Statement text with :name bind markers
            params: Bind values keyed by marker name

        Returns:
            list[Record] for statements returning rows, WriteResult otherwise

        Raises:
            StorageError: Wrapping the driver error with its message intact
        """
        logger.debug("Executing statement", extra={"sql": sql})
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), dict(params or {}))
                if result.returns_rows:
                    return [dict(row) for row in result.mappings().all()]
                insert_id = None
                if sql.lstrip().upper().startswith("INSERT"):
                    insert_id = result.lastrowid
                return WriteResult(insert_id=insert_id, affected_rows=result.rowcount)
        except SQLAlchemyError as e:
            logger.error(
                "Database query error",
                extra={"error": str(e), "sql": sql},
            )
            raise StorageError(_driver_message(e)) from e

    async def ping(self) -> bool:
        """
        Test database connectivity.

        Returns:
            bool: True if a connection could be acquired and used
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error("Database connection error", extra={"error": str(e)})
            return False

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self.engine.dispose()
