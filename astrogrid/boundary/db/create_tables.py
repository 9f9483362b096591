"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, astrogrid.configs
System role: Database schema initialization

Usage:
    python -m astrogrid.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from astrogrid.boundary.db.base import Base
from astrogrid.boundary.db.storage.sql_storage import get_async_engine
from astrogrid.configs import get_settings
from astrogrid.observability import configure_logging

# Import all models to register them with Base.metadata
from astrogrid.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully")


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped successfully")


async def _main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    engine = get_async_engine(settings.database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
