"""
Canned-response storage.

A stand-in implementation of the storage contract for environments with
no reachable backing store. It inspects statement text and answers from
fixed sample datasets. It is selected explicitly through configuration
(DB_BACKEND=canned) and is never a fallback for a failed connection.

Reads return the whole sample table whatever the filters, except that a
primary-key lookup (WHERE id = ...) is honored. Writes do not change the
datasets; INSERT hands out increasing ids starting at 10.

Dependencies: re (stdlib), astrogrid.boundary.db.storage.sample_data
System role: Test double / offline mode for the storage contract
"""

import itertools
import logging
import re
from typing import Any, Mapping

from astrogrid.boundary.db.storage.base import Record, WriteResult
from astrogrid.boundary.db.storage.sample_data import build_sample_tables

logger = logging.getLogger(__name__)

_COUNT = re.compile(r"^SELECT COUNT\(\*\) AS total FROM (\w+)", re.IGNORECASE)
_BY_ID = re.compile(r"^SELECT \* FROM (\w+) WHERE id = ", re.IGNORECASE)
_SELECT = re.compile(r"^SELECT \* FROM (\w+)", re.IGNORECASE)


class CannedStorage:
    """
    Storage that matches statement text against sample tables.

    Attributes:
        history: (sql, params) pairs in execution order
    """

    def __init__(self, first_insert_id: int = 10) -> None:
        self._insert_ids = itertools.count(first_insert_id)
        self.history: list[tuple[str, dict[str, Any]]] = []

    async def execute(
        self,
        sql: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[Record] | WriteResult:
        params = dict(params or {})
        statement = " ".join(sql.split())
        self.history.append((statement, params))
        logger.debug("DB Query (canned)", extra={"sql": statement})

        if match := _COUNT.match(statement):
            return [{"total": len(build_sample_tables().get(match.group(1), []))}]
        if match := _BY_ID.match(statement):
            rows = build_sample_tables().get(match.group(1), [])
            return [row for row in rows if str(row["id"]) == str(params.get("id"))]
        if match := _SELECT.match(statement):
            return build_sample_tables().get(match.group(1), [])

        keyword = statement.split(" ", 1)[0].upper()
        if keyword == "INSERT":
            return WriteResult(insert_id=next(self._insert_ids), affected_rows=1)
        if keyword in ("UPDATE", "DELETE"):
            return WriteResult(affected_rows=1)
        return []

    async def ping(self) -> bool:
        logger.info("Testing database connection (canned mode)")
        return True

    async def close(self) -> None:
        return None
