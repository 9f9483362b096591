"""
Storage contract.

The minimal interface the adapter needs from a backing store: run one
parameterized statement and hand back either rows or mutation metadata.

Dependencies: typing (stdlib)
System role: Seam between the adapter and any concrete store
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

Record = dict[str, Any]


@dataclass(frozen=True)
class WriteResult:
    """
    Mutation metadata returned for INSERT/UPDATE/DELETE statements.

    Attributes:
        insert_id: Primary key assigned by an INSERT, None otherwise
        affected_rows: Rows changed by the statement (0 is not an error)
    """

    insert_id: int | None = None
    affected_rows: int = 0


@runtime_checkable
class Storage(Protocol):
    """Anything that can execute a parameterized statement."""

    async def execute(
        self,
        sql: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[Record] | WriteResult:
        """
        Execute one statement.

        Returns:
            list of row dicts for reads, WriteResult for mutations

        Raises:
            StorageError: On any backing-store failure
        """
        ...

    async def ping(self) -> bool:
        """Return True when the store is reachable."""
        ...

    async def close(self) -> None:
        """Release pooled resources."""
        ...
