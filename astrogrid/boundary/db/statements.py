"""
Parameterized SQL statement builders.

Every value travels as a named bind parameter; only table and column
names are interpolated, and those must pass check_identifier() first.
Bind names are prefixed by role (w_ for filters, v_ for values) so a
field can appear in both a SET and a WHERE clause.

Dependencies: re (stdlib)
System role: Text SQL generation shared by CRUD classes and the document accessor
"""

import re
from typing import Any, Mapping, NamedTuple

from astrogrid.boundary.db.exceptions import InvalidField, InvalidQuery

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

ASCENDING = "ASC"
DESCENDING = "DESC"


class Statement(NamedTuple):
    """SQL text plus its bind parameters, in clause order."""

    sql: str
    params: dict[str, Any]


def check_identifier(table: str, name: str) -> str:
    """
    Ensure a table or column name is safe to interpolate.

    Raises:
        InvalidField: If name is not a plain SQL identifier
    """
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise InvalidField(table, str(name))
    return name


def normalize_direction(direction: str) -> str:
    """
    Map a caller's sort direction onto the store's ASC/DESC tokens.

    Raises:
        InvalidQuery: If direction is neither ascending nor descending
    """
    token = str(direction).strip().upper()
    if token in ("ASC", "ASCENDING"):
        return ASCENDING
    if token in ("DESC", "DESCENDING"):
        return DESCENDING
    raise InvalidQuery(f"Invalid order direction: {direction!r}")


def _order_clause(table: str, order_field: str, direction: str) -> str:
    return f" ORDER BY {check_identifier(table, order_field)} {normalize_direction(direction)}"


def _where_clause(table: str, conditions: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
    params: dict[str, Any] = {}
    parts = []
    for field, value in conditions.items():
        check_identifier(table, field)
        parts.append(f"{field} = :w_{field}")
        params[f"w_{field}"] = value
    if not parts:
        return "", params
    return " WHERE " + " AND ".join(parts), params


def select_all(table: str, order_field: str, direction: str) -> Statement:
    check_identifier(table, table)
    return Statement(f"SELECT * FROM {table}{_order_clause(table, order_field, direction)}", {})


def select_where(
    table: str,
    conditions: Mapping[str, Any],
    order_field: str,
    direction: str,
) -> Statement:
    """Equality filters AND-combined, in the iteration order of conditions."""
    check_identifier(table, table)
    where, params = _where_clause(table, conditions)
    order = _order_clause(table, order_field, direction)
    return Statement(f"SELECT * FROM {table}{where}{order}", params)


def select_by_id(table: str, doc_id: Any) -> Statement:
    check_identifier(table, table)
    return Statement(f"SELECT * FROM {table} WHERE id = :id", {"id": doc_id})


def select_page(
    table: str,
    order_field: str,
    direction: str,
    limit: int,
    offset: int,
    conditions: Mapping[str, Any] | None = None,
) -> Statement:
    check_identifier(table, table)
    where, params = _where_clause(table, conditions or {})
    order = _order_clause(table, order_field, direction)
    params.update({"limit": int(limit), "offset": int(offset)})
    return Statement(
        f"SELECT * FROM {table}{where}{order} LIMIT :limit OFFSET :offset",
        params,
    )


def count_all(table: str) -> Statement:
    check_identifier(table, table)
    return Statement(f"SELECT COUNT(*) AS total FROM {table}", {})


def insert(table: str, data: Mapping[str, Any]) -> Statement:
    """
    INSERT whose column list is taken from the keys of data.

    Raises:
        InvalidQuery: If data is empty
        InvalidField: If a key is not a plain identifier
    """
    check_identifier(table, table)
    if not data:
        raise InvalidQuery(f"Cannot insert an empty document into {table!r}")
    columns = [check_identifier(table, field) for field in data]
    placeholders = ", ".join(f":v_{field}" for field in columns)
    params = {f"v_{field}": value for field, value in data.items()}
    return Statement(
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
        params,
    )


def update(table: str, doc_id: Any, data: Mapping[str, Any]) -> Statement:
    """
    UPDATE ... SET built from the keys of data, addressed by id.

    Raises:
        InvalidQuery: If data is empty
        InvalidField: If a key is not a plain identifier
    """
    check_identifier(table, table)
    if not data:
        raise InvalidQuery(f"Cannot apply an empty update to {table!r}")
    assignments = ", ".join(
        f"{check_identifier(table, field)} = :v_{field}" for field in data
    )
    params = {f"v_{field}": value for field, value in data.items()}
    params["id"] = doc_id
    return Statement(f"UPDATE {table} SET {assignments} WHERE id = :id", params)


def delete(table: str, doc_id: Any) -> Statement:
    check_identifier(table, table)
    return Statement(f"DELETE FROM {table} WHERE id = :id", {"id": doc_id})
