"""
Storage factory for selecting between MySQL and canned sample data.

Depends on the DB_BACKEND environment variable. Provides a consistent
interface regardless of underlying implementation.

Dependencies: astrogrid.boundary.db.storage, astrogrid.configs
System role: Storage instantiation and selection
"""

import logging

from astrogrid.boundary.db.storage.base import Storage
from astrogrid.boundary.db.storage.canned_storage import CannedStorage
from astrogrid.boundary.db.storage.sql_storage import SqlStorage
from astrogrid.configs import get_settings
from astrogrid.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def create_storage(db_config: DatabaseSettings | None = None) -> Storage:
    """
    Factory function to get storage based on configuration.

    Call once at process start and pass the handle to every adapter call.

    Args:
        db_config: Database settings (defaults to the process settings)

    Returns:
        SqlStorage or CannedStorage: Configured storage instance

    Raises:
        ValueError: If DB_BACKEND is invalid
    """
    db_config = db_config or get_settings().database
    backend = db_config.backend.lower()

    if backend == "mysql":
        logger.info(f"{__name__}:create_storage - Creating MySQL storage pool")
        return SqlStorage.from_settings(db_config)

    elif backend == "canned":
        logger.info(f"{__name__}:create_storage - Creating canned storage (offline mode)")
        return CannedStorage()

    else:
        raise ValueError(
            f"Invalid DB_BACKEND: {backend}. Must be 'mysql' or 'canned'."
        )
