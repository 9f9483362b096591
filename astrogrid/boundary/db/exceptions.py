"""
Adapter error taxonomy.

Absence of a row is not an error: single-record reads return a Snapshot
whose exists() is False. Everything here is raised to the caller, who
decides user-facing behavior. Nothing in this layer retries.

Dependencies: none
System role: Error types shared by storage, registry, and query surface
"""


class AdapterError(Exception):
    """Base class for every error raised by the document adapter."""


class UnknownCollection(AdapterError):
    """Raised when a collection name is not registered."""

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name
        super().__init__(f"Unknown collection: {collection_name}")


class StorageError(AdapterError):
    """
    Backing-store failure.

    Carries the driver's message verbatim; the driver exception is
    chained as __cause__. No transient/permanent classification.
    """


class InvalidQuery(AdapterError, ValueError):
    """Raised when a query or payload cannot be translated to SQL."""


class UnsupportedOperator(InvalidQuery):
    """Raised when a where-constraint uses an operator other than equality."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unsupported where operator: {operator!r} (only '==' is supported)")


class InvalidField(InvalidQuery):
    """Raised when a field name is not a declared column or not an identifier."""

    def __init__(self, table: str, field: str) -> None:
        self.table = table
        self.field = field
        super().__init__(f"Invalid field {field!r} for table {table!r}")


class ImmutableCollection(AdapterError):
    """Raised when updating or deleting in an append-only collection."""

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name
        super().__init__(f"Collection {collection_name!r} is append-only")
