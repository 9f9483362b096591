"""
Query constraint builder.

Pure constructors for collection/document references and declarative
query constraints. Nothing here touches storage; descriptors are
immutable and built fresh for every call.

Dependencies: dataclasses (stdlib)
System role: Query construction half of the document surface
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Union

from astrogrid.boundary.db.statements import normalize_direction
from astrogrid.models.documents import CollectionRef, DocRef

EQUALS = "=="


@dataclass(frozen=True)
class Where:
    """Filter constraint. Only the equality operator can be executed."""

    field: str
    operator: str
    value: Any


@dataclass(frozen=True)
class OrderBy:
    """Ordering constraint; direction is already normalized to ASC/DESC."""

    field: str
    direction: str = "ASC"


@dataclass(frozen=True)
class Limit:
    """Row limit. Built for interface parity; get_docs does not apply it."""

    n: int


Constraint = Union[Where, OrderBy, Limit]


@dataclass(frozen=True)
class QueryDescriptor:
    """A collection name plus its constraints, in composition order."""

    collection_name: str
    constraints: tuple[Constraint, ...] = ()


def collection(name: str) -> CollectionRef:
    return CollectionRef(name)


def doc(name: str, doc_id: Any) -> DocRef:
    return DocRef(name, doc_id)


def where(field: str, operator: str, value: Any) -> Where:
    return Where(field, operator, value)


def order_by(field: str, direction: str = "asc") -> OrderBy:
    """
    Build an ordering constraint.

    Raises:
        InvalidQuery: If direction is not asc/desc (any case)
    """
    return OrderBy(field, normalize_direction(direction))


def limit(n: int) -> Limit:
    return Limit(int(n))


def query(ref: CollectionRef, *constraints: Constraint) -> QueryDescriptor:
    return QueryDescriptor(ref.collection_name, tuple(constraints))


def server_timestamp() -> str:
    """Current UTC time as an ISO-8601 string, evaluated at call time."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
