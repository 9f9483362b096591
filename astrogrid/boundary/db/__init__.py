"""
Database boundary layer: models, storage, CRUD, and the entity registry.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - Storage, WriteResult, SqlStorage, CannedStorage, create_storage: Storage contract
  - Collection, EntityRegistry, get_registry: Table routing
  - AdapterError and subclasses: Error taxonomy

Dependencies: sqlalchemy, astrogrid.configs
System role: Relational adapter behind the document surface
"""

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from astrogrid.boundary.db.exceptions import (
    AdapterError,
    ImmutableCollection,
    InvalidField,
    InvalidQuery,
    StorageError,
    UnknownCollection,
    UnsupportedOperator,
)
from astrogrid.boundary.db.storage import (
    CannedStorage,
    SqlStorage,
    Storage,
    WriteResult,
    create_storage,
)
from astrogrid.boundary.db.registry import Collection, EntityRegistry, get_registry

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Errors
    "AdapterError",
    "ImmutableCollection",
    "InvalidField",
    "InvalidQuery",
    "StorageError",
    "UnknownCollection",
    "UnsupportedOperator",
    # Storage
    "CannedStorage",
    "SqlStorage",
    "Storage",
    "WriteResult",
    "create_storage",
    # Registry
    "Collection",
    "EntityRegistry",
    "get_registry",
]
