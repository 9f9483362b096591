"""
Storage implementations of the execute(sql, params) contract.

Exports:
  - Storage, WriteResult, Record: The contract and its result types
  - SqlStorage: Pooled MySQL storage (SQLAlchemy AsyncEngine)
  - CannedStorage: Sample-data stand-in selected by configuration
  - create_storage(): Factory driven by DatabaseSettings.backend
"""

from astrogrid.boundary.db.storage.base import Record, Storage, WriteResult
from astrogrid.boundary.db.storage.canned_storage import CannedStorage
from astrogrid.boundary.db.storage.sql_storage import SqlStorage, get_async_engine
from astrogrid.boundary.db.storage.storage_factory import create_storage

__all__ = [
    "Record",
    "Storage",
    "WriteResult",
    "CannedStorage",
    "SqlStorage",
    "get_async_engine",
    "create_storage",
]
