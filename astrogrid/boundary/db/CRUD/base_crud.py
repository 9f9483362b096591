"""
Base CRUD operations over the storage contract.

Provides generic Create, Read, Update, Delete operations for one table,
driven by the table's ORM model: the model supplies the table name, the
declared column set that payloads and sort/filter fields are validated
against, and which columns hold JSON. Model-specific CRUD classes add the
specialized lookups that the registry routes filters to.

Every method takes the storage handle as its first argument; nothing
here holds a connection between calls.

Dependencies: sqlalchemy, astrogrid.boundary.db.statements
System role: Foundation for all entity CRUD operations
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import JSON

from astrogrid.boundary.db import statements
from astrogrid.boundary.db.base import Base
from astrogrid.boundary.db.exceptions import InvalidField, InvalidQuery
from astrogrid.boundary.db.storage.base import Record, Storage, WriteResult
from astrogrid.models.documents import Page

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_ANY = object()


@dataclass(frozen=True)
class FilterRoute:
    """
    One specialized lookup a filters mapping can be routed to.

    Attributes:
        key: Filter key that selects this route
        lookup: Name of the CRUD coroutine to call
        equals: If set, the route only matches this exact value and the
            lookup is called without it
        single: Lookup returns one row or None instead of a list
    """

    key: str
    lookup: str
    equals: Any = _ANY
    single: bool = False

    def matches(self, filters: Mapping[str, Any]) -> bool:
        value = filters.get(self.key)
        # Empty strings and zero select nothing, like a missing key
        if not value:
            return False
        return self.equals is _ANY or value == self.equals

    async def dispatch(
        self,
        crud: "BaseCRUD",
        storage: Storage,
        filters: Mapping[str, Any],
    ) -> list[Record]:
        method = getattr(crud, self.lookup)
        if self.equals is _ANY:
            result = await method(storage, filters[self.key])
        else:
            result = await method(storage)
        if self.single:
            return [] if result is None else [result]
        return list(result)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class declaring the table
        table: Physical table name
        columns: Declared column names
        default_order: (field, direction) used by get_all()
        filter_routes: Specialized lookups in priority order
        mutable: False for append-only collections
    """

    default_order: tuple[str, str] = ("created_at", statements.DESCENDING)
    filter_routes: tuple[FilterRoute, ...] = ()
    mutable: bool = True

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model
        self.table: str = model.__tablename__
        self.columns = frozenset(model.__table__.columns.keys())
        self._json_columns = frozenset(
            column.name for column in model.__table__.columns if isinstance(column.type, JSON)
        )

    def validate_fields(self, fields: Sequence[str]) -> None:
        """
        Check field names against the declared column set.

        Raises:
            InvalidField: For the first field that is not a declared column
        """
        for field in fields:
            if field not in self.columns:
                raise InvalidField(self.table, field)

    def encode(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Serialize non-string values bound for JSON columns."""
        encoded = dict(data)
        for column in self._json_columns & encoded.keys():
            value = encoded[column]
            if value is not None and not isinstance(value, str):
                encoded[column] = json.dumps(value)
        return encoded

    def decode(self, row: Record) -> Record:
        """Parse JSON columns of a fetched row in place."""
        for column in self._json_columns & row.keys():
            value = row[column]
            if isinstance(value, (str, bytes)):
                try:
                    row[column] = json.loads(value)
                except ValueError:
                    logger.warning(
                        "Undecodable JSON column",
                        extra={"table": self.table, "column": column},
                    )
        return row

    async def _fetch(self, storage: Storage, stmt: statements.Statement) -> list[Record]:
        rows = await storage.execute(stmt.sql, stmt.params)
        if isinstance(rows, WriteResult):
            return []
        return [self.decode(dict(row)) for row in rows]

    async def get_all(
        self,
        storage: Storage,
        order_field: str | None = None,
        direction: str | None = None,
    ) -> list[Record]:
        """
        Retrieve every row in order.

        Args:
            storage: Storage handle
            order_field: Sort column (defaults to the entity's default order)
            direction: "ASC" or "DESC"

        Returns:
            List of rows
        """
        default_field, default_direction = self.default_order
        order_field = order_field or default_field
        self.validate_fields([order_field])
        stmt = statements.select_all(self.table, order_field, direction or default_direction)
        return await self._fetch(storage, stmt)

    async def get_by_id(self, storage: Storage, id: Any) -> Record | None:
        """
        Retrieve a single row by primary key.

        Returns:
            Row if found, None otherwise
        """
        rows = await self._fetch(storage, statements.select_by_id(self.table, id))
        return rows[0] if rows else None

    async def find_where(
        self,
        storage: Storage,
        conditions: Mapping[str, Any],
        order_field: str = "created_at",
        direction: str = statements.DESCENDING,
    ) -> list[Record]:
        """
        Retrieve rows matching every equality condition.

        Args:
            storage: Storage handle
            conditions: field -> value, AND-combined
            order_field: Sort column
            direction: "ASC" or "DESC"

        Returns:
            Matching rows in order

        Raises:
            InvalidField: If a condition or the sort field is not a column
        """
        self.validate_fields([*conditions, order_field])
        stmt = statements.select_where(self.table, conditions, order_field, direction)
        return await self._fetch(storage, stmt)

    async def create(self, storage: Storage, data: Mapping[str, Any]) -> Record | None:
        """
        Insert a row and read it back.

        Returns:
            The stored row including server-populated columns
        """
        self.validate_fields(list(data))
        stmt = statements.insert(self.table, self.encode(data))
        result = await storage.execute(stmt.sql, stmt.params)
        if not isinstance(result, WriteResult) or result.insert_id is None:
            raise InvalidQuery(f"Insert into {self.table!r} returned no id")
        return await self.get_by_id(storage, result.insert_id)

    async def update_by_id(
        self,
        storage: Storage,
        id: Any,
        data: Mapping[str, Any],
    ) -> Record | None:
        """
        Update a row by primary key and read it back.

        Returns:
            Updated row if found, None otherwise
        """
        self.validate_fields(list(data))
        stmt = statements.update(self.table, id, self.encode(data))
        await storage.execute(stmt.sql, stmt.params)
        return await self.get_by_id(storage, id)

    async def delete_by_id(self, storage: Storage, id: Any) -> bool:
        """
        Delete a row by primary key.

        Returns:
            True if a row was deleted, False if not found
        """
        stmt = statements.delete(self.table, id)
        result = await storage.execute(stmt.sql, stmt.params)
        return isinstance(result, WriteResult) and result.affected_rows > 0

    async def exists(self, storage: Storage, id: Any) -> bool:
        return await self.get_by_id(storage, id) is not None

    async def get_paginated(self, storage: Storage, page: int = 1, limit: int = 10) -> Page:
        """
        Retrieve one page of rows in the default order plus the table total.

        Args:
            storage: Storage handle
            page: 1-based page number
            limit: Page size

        Raises:
            InvalidQuery: If page or limit is below 1
        """
        if page < 1 or limit < 1:
            raise InvalidQuery("page and limit must be positive")
        order_field, direction = self.default_order
        stmt = statements.select_page(self.table, order_field, direction, limit, (page - 1) * limit)
        items = await self._fetch(storage, stmt)
        count = await storage.execute(*statements.count_all(self.table))
        total = int(count[0]["total"]) if count else 0
        return Page(items=items, total=total, page=page, limit=limit)

    def route(self, filters: Mapping[str, Any]) -> FilterRoute | None:
        """First filter route, in priority order, that the filters select."""
        for candidate in self.filter_routes:
            if candidate.matches(filters):
                return candidate
        return None

    async def query(self, storage: Storage, filters: Mapping[str, Any]) -> list[Record]:
        """
        Dispatch filters to the single highest-priority specialized lookup.

        Only one filter dimension is honored; other keys are ignored. With
        no matching route this is get_all().
        """
        selected = self.route(filters)
        if selected is None:
            return await self.get_all(storage)
        ignored = sorted(set(filters) - {selected.key})
        if ignored:
            logger.debug(
                "Ignoring lower-priority filters",
                extra={"table": self.table, "route": selected.lookup, "ignored": ignored},
            )
        return await selected.dispatch(self, storage, filters)
