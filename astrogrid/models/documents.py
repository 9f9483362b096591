"""
Document references and read snapshots.

Snapshots are transient wrappers built per call. A missing document is a
Snapshot whose exists() is False rather than an exception.

Dependencies: dataclasses (stdlib)
System role: Result surface consumed by UI and business logic
"""

import math
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class CollectionRef:
    """Opaque handle to a named collection, not yet bound to a table."""

    collection_name: str


@dataclass(frozen=True)
class DocRef:
    """Identifies one document by collection name and primary key."""

    collection_name: str
    doc_id: Any

    @property
    def id(self) -> Any:
        return self.doc_id


@dataclass(frozen=True)
class Snapshot:
    """
    Read result for one document.

    Attributes:
        id: Document primary key
        ref: Reference back to the document
    """

    id: Any
    ref: DocRef
    _data: dict[str, Any] | None = field(default=None, repr=False)

    @classmethod
    def from_row(cls, collection_name: str, row: dict[str, Any]) -> "Snapshot":
        return cls(id=row.get("id"), ref=DocRef(collection_name, row.get("id")), _data=dict(row))

    @classmethod
    def missing(cls, collection_name: str, doc_id: Any) -> "Snapshot":
        return cls(id=doc_id, ref=DocRef(collection_name, doc_id), _data=None)

    def exists(self) -> bool:
        return self._data is not None

    def data(self) -> dict[str, Any] | None:
        """Shallow copy of the row, or None when the document does not exist."""
        if self._data is None:
            return None
        return dict(self._data)

    def get(self, field_name: str, default: Any = None) -> Any:
        if self._data is None:
            return default
        return self._data.get(field_name, default)


@dataclass(frozen=True)
class QueryResult:
    """Ordered snapshots returned by a collection read."""

    docs: list[Snapshot] = field(default_factory=list)

    @classmethod
    def from_rows(cls, collection_name: str, rows: list[dict[str, Any]]) -> "QueryResult":
        return cls(docs=[Snapshot.from_row(collection_name, row) for row in rows])

    @property
    def empty(self) -> bool:
        return len(self.docs) == 0

    @property
    def size(self) -> int:
        return len(self.docs)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.docs)

    def __len__(self) -> int:
        return len(self.docs)


@dataclass(frozen=True)
class Page:
    """
    One page of a collection listing.

    Attributes:
        items: Rows on this page
        total: Row count of the whole table
        page: 1-based page number
        limit: Page size
    """

    items: list[dict[str, Any]]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
