"""
Constraint translator / executor.

Turns a QueryDescriptor into one ordered fetch through the registry and
wraps the rows as snapshots.

Translation rules:
  - where constraints collapse into a field -> value map; a later
    constraint on the same field replaces an earlier one
  - the first order_by wins; without one, rows come back created_at DESC
  - limit constraints are accepted and ignored

Dependencies: astrogrid.boundary.db
System role: Read path of the document surface
"""

import logging
from typing import Any

from astrogrid.application.adapters.query_builder import (
    EQUALS,
    Limit,
    OrderBy,
    QueryDescriptor,
    Where,
)
from astrogrid.boundary.db.exceptions import UnsupportedOperator
from astrogrid.boundary.db.registry import EntityRegistry, get_registry
from astrogrid.boundary.db.statements import DESCENDING
from astrogrid.boundary.db.storage.base import Storage
from astrogrid.models.documents import QueryResult

logger = logging.getLogger(__name__)

DEFAULT_ORDER_FIELD = "created_at"
DEFAULT_ORDER_DIRECTION = DESCENDING


def collapse_filters(constraints: tuple) -> dict[str, Any]:
    """
    Collapse where constraints into an equality filter map.

    Raises:
        UnsupportedOperator: If a constraint uses anything but '=='
    """
    filters: dict[str, Any] = {}
    for constraint in constraints:
        if not isinstance(constraint, Where):
            continue
        if constraint.operator != EQUALS:
            raise UnsupportedOperator(constraint.operator)
        filters[constraint.field] = constraint.value
    return filters


def resolve_order(constraints: tuple) -> tuple[str, str]:
    for constraint in constraints:
        if isinstance(constraint, OrderBy):
            return constraint.field, constraint.direction
    return DEFAULT_ORDER_FIELD, DEFAULT_ORDER_DIRECTION


async def get_docs(
    storage: Storage,
    descriptor: QueryDescriptor,
    registry: EntityRegistry | None = None,
) -> QueryResult:
    """
    Execute a query descriptor.

    Args:
        storage: Storage handle
        descriptor: Collection plus constraints
        registry: Entity registry (defaults to the process registry)

    Returns:
        QueryResult with one snapshot per row

    Raises:
        UnsupportedOperator: For a non-equality where constraint
        InvalidField: For a filter or sort field that is not a column
        StorageError: On backing-store failure
    """
    registry = registry or get_registry()
    crud = registry.resolve(descriptor.collection_name, soft=True)
    if crud is None:
        return QueryResult()

    filters = collapse_filters(descriptor.constraints)
    order_field, direction = resolve_order(descriptor.constraints)
    if any(isinstance(constraint, Limit) for constraint in descriptor.constraints):
        logger.debug("limit() is not applied by get_docs", extra={"collection": crud.table})

    if filters:
        rows = await crud.find_where(storage, filters, order_field, direction)
    else:
        rows = await crud.get_all(storage, order_field, direction)
    return QueryResult.from_rows(descriptor.collection_name, rows)
