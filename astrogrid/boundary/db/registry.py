"""
Entity registry and table router.

Maps each logical collection name to its CRUD object (physical table,
declared columns, default order, specialized filter lookups). The
mapping is built once; lookups go through an enumerated Collection set
instead of string matching, and construction fails if any Collection
member lacks an entry.

Unknown collection names are handled in exactly one place, resolve().
Writes always raise UnknownCollection. Reads follow the configured
UnknownCollectionPolicy: WARN logs and returns an empty result, RAISE
raises like a write.

Dependencies: astrogrid.boundary.db.CRUD, astrogrid.configs
System role: Name-based dispatch for the document adapter
"""

import logging
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from astrogrid.boundary.db.CRUD import (
    BaseCRUD,
    anomaly_crud,
    command_crud,
    ground_station_crud,
    mission_crud,
    satellite_crud,
    telemetry_crud,
    user_crud,
)
from astrogrid.boundary.db.exceptions import ImmutableCollection, UnknownCollection
from astrogrid.boundary.db.storage.base import Record, Storage
from astrogrid.configs import get_settings
from astrogrid.configs.database import UnknownCollectionPolicy
from astrogrid.models.documents import Page, QueryResult, Snapshot

logger = logging.getLogger(__name__)


class Collection(str, Enum):
    """Every logical collection the adapter knows about."""

    SATELLITES = "satellites"
    GROUND_STATIONS = "ground_stations"
    USERS = "users"
    TELEMETRY = "telemetry"
    COMMANDS = "commands"
    ANOMALIES = "anomalies"
    MISSIONS = "missions"


DEFAULT_ENTRIES: Mapping[Collection, BaseCRUD] = MappingProxyType(
    {
        Collection.SATELLITES: satellite_crud,
        Collection.GROUND_STATIONS: ground_station_crud,
        Collection.USERS: user_crud,
        Collection.TELEMETRY: telemetry_crud,
        Collection.COMMANDS: command_crud,
        Collection.ANOMALIES: anomaly_crud,
        Collection.MISSIONS: mission_crud,
    }
)


class EntityRegistry:
    """
    Routes collection names to CRUD objects.

    Attributes:
        policy: Read behavior for unregistered names
    """

    def __init__(
        self,
        entries: Mapping[Collection, BaseCRUD] | None = None,
        policy: UnknownCollectionPolicy = UnknownCollectionPolicy.WARN,
    ) -> None:
        """
        Build the registry.

        Args:
            entries: Collection -> CRUD mapping (defaults to DEFAULT_ENTRIES)
            policy: Unknown-collection policy for reads

        Raises:
            ValueError: If a Collection member has no entry
        """
        entries = dict(DEFAULT_ENTRIES if entries is None else entries)
        missing = [member.value for member in Collection if member not in entries]
        if missing:
            raise ValueError(f"Registry is missing collections: {', '.join(missing)}")
        self._entries = MappingProxyType(entries)
        self.policy = UnknownCollectionPolicy(policy)

    @property
    def collections(self) -> tuple[str, ...]:
        return tuple(member.value for member in self._entries)

    def lookup(self, name: str | Collection) -> BaseCRUD | None:
        """Return the CRUD for name, or None if it is not registered."""
        try:
            return self._entries[Collection(name)]
        except ValueError:
            return None

    def resolve(self, name: str | Collection, *, soft: bool = False) -> BaseCRUD | None:
        """
        Resolve a collection name to its CRUD object.

        Args:
            name: Logical collection name
            soft: True on read paths; the policy may then downgrade an
                unknown name to a warning

        Returns:
            The CRUD object, or None for a softly-failed unknown name

        Raises:
            UnknownCollection: If name is unregistered and the failure is hard
        """
        crud = self.lookup(name)
        if crud is not None:
            return crud
        if soft and self.policy is UnknownCollectionPolicy.WARN:
            logger.warning(f"Unknown collection: {name}", extra={"collection": str(name)})
            return None
        raise UnknownCollection(str(name))

    def table_for(self, name: str | Collection) -> str:
        """Physical table for name; always hard-fails on an unknown name."""
        return self.resolve(name).table

    def _writable(self, name: str | Collection) -> BaseCRUD:
        crud = self.resolve(name)
        if not crud.mutable:
            raise ImmutableCollection(str(name))
        return crud

    async def get_collection(self, storage: Storage, name: str | Collection) -> QueryResult:
        """
        All documents of a collection in the entity's default order.

        Returns:
            QueryResult (empty for an unknown name under the WARN policy)
        """
        crud = self.resolve(name, soft=True)
        if crud is None:
            return QueryResult()
        return QueryResult.from_rows(crud.table, await crud.get_all(storage))

    async def get_document(self, storage: Storage, name: str | Collection, doc_id: Any) -> Snapshot:
        """One document by primary key; a missing row is exists() == False."""
        crud = self.resolve(name, soft=True)
        if crud is None:
            return Snapshot.missing(str(name), doc_id)
        row = await crud.get_by_id(storage, doc_id)
        if row is None:
            return Snapshot.missing(crud.table, doc_id)
        return Snapshot.from_row(crud.table, row)

    async def query_collection(
        self,
        storage: Storage,
        name: str | Collection,
        filters: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """
        Filter a collection through its specialized lookups.

        Only the highest-priority filter key the entity recognizes is
        applied; remaining keys are ignored.
        """
        crud = self.resolve(name, soft=True)
        if crud is None:
            return QueryResult()
        rows = await crud.query(storage, filters or {})
        return QueryResult.from_rows(crud.table, rows)

    async def get_paginated(
        self,
        storage: Storage,
        name: str | Collection,
        page: int = 1,
        limit: int = 10,
    ) -> Page:
        crud = self.resolve(name, soft=True)
        if crud is None:
            return Page(items=[], total=0, page=page, limit=limit)
        return await crud.get_paginated(storage, page, limit)

    async def create_document(
        self,
        storage: Storage,
        name: str | Collection,
        data: Mapping[str, Any],
    ) -> Record | None:
        """
        Create a document and return the stored row.

        Raises:
            UnknownCollection: If name is not registered
            InvalidField: If data has a key that is not a declared column
        """
        crud = self.resolve(name)
        return await crud.create(storage, data)

    async def update_document(
        self,
        storage: Storage,
        name: str | Collection,
        doc_id: Any,
        data: Mapping[str, Any],
    ) -> Record | None:
        """
        Update a document and return the stored row (None if it is gone).

        Raises:
            UnknownCollection: If name is not registered
            ImmutableCollection: If the collection is append-only
        """
        crud = self._writable(name)
        return await crud.update_by_id(storage, doc_id, data)

    async def delete_document(self, storage: Storage, name: str | Collection, doc_id: Any) -> bool:
        """
        Delete a document.

        Returns:
            True if a row was removed

        Raises:
            UnknownCollection: If name is not registered
            ImmutableCollection: If the collection is append-only
        """
        crud = self._writable(name)
        return await crud.delete_by_id(storage, doc_id)


@lru_cache
def get_registry() -> EntityRegistry:
    """
    Process-wide registry built from settings.

    Returns:
        EntityRegistry using the configured unknown-collection policy
    """
    return EntityRegistry(policy=get_settings().database.unknown_collection_policy)
