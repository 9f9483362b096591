"""
Document accessor.

Single-record get/insert/update/delete by primary key, independent of
the constraint machinery. Column lists are taken from the payload keys
as given: keys must be plain identifiers, but they are not checked
against the table's declared columns (registry writes do that). JSON
columns go through the entity CRUD's encode()/decode() like every other
read and write path.

Updates and deletes run unconditionally and succeed even when no row
matches. An unknown collection always raises UnknownCollection here.

Dependencies: astrogrid.boundary.db
System role: Keyed read/write path of the document surface
"""

import logging
from typing import Any, Mapping

from astrogrid.boundary.db import statements
from astrogrid.boundary.db.CRUD import BaseCRUD
from astrogrid.boundary.db.exceptions import InvalidQuery
from astrogrid.boundary.db.registry import EntityRegistry, get_registry
from astrogrid.boundary.db.storage.base import Storage, WriteResult
from astrogrid.models.documents import CollectionRef, DocRef, Snapshot

logger = logging.getLogger(__name__)


def _crud_for(name: str, registry: EntityRegistry | None) -> BaseCRUD:
    return (registry or get_registry()).resolve(name)


async def get_doc(
    storage: Storage,
    doc_ref: DocRef,
    registry: EntityRegistry | None = None,
) -> Snapshot:
    """
    Fetch one document by primary key.

    Returns:
        Snapshot; exists() is False when no row has that id

    Raises:
        UnknownCollection: If the collection is not registered
    """
    crud = _crud_for(doc_ref.collection_name, registry)
    stmt = statements.select_by_id(crud.table, doc_ref.doc_id)
    rows = await storage.execute(stmt.sql, stmt.params)
    if not rows or isinstance(rows, WriteResult):
        return Snapshot.missing(doc_ref.collection_name, doc_ref.doc_id)
    return Snapshot.from_row(doc_ref.collection_name, crud.decode(dict(rows[0])))


async def add_doc(
    storage: Storage,
    collection_ref: CollectionRef,
    data: Mapping[str, Any],
    registry: EntityRegistry | None = None,
) -> dict[str, Any]:
    """
    Insert a document.

    Returns:
        {"id": new_id}; re-fetch with get_doc() for the stored row

    Raises:
        UnknownCollection: If the collection is not registered
        InvalidField: If a payload key is not a plain identifier
    """
    crud = _crud_for(collection_ref.collection_name, registry)
    stmt = statements.insert(crud.table, crud.encode(data))
    result = await storage.execute(stmt.sql, stmt.params)
    if not isinstance(result, WriteResult) or result.insert_id is None:
        raise InvalidQuery(f"Insert into {crud.table!r} returned no id")
    logger.debug("Document added", extra={"collection": crud.table, "doc_id": result.insert_id})
    return {"id": result.insert_id}


async def update_doc(
    storage: Storage,
    doc_ref: DocRef,
    partial_data: Mapping[str, Any],
    registry: EntityRegistry | None = None,
) -> WriteResult:
    """
    Apply a partial update by primary key.

    Returns:
        WriteResult; affected_rows == 0 when the id does not exist

    Raises:
        UnknownCollection: If the collection is not registered
    """
    crud = _crud_for(doc_ref.collection_name, registry)
    stmt = statements.update(crud.table, doc_ref.doc_id, crud.encode(partial_data))
    return await storage.execute(stmt.sql, stmt.params)


async def delete_doc(
    storage: Storage,
    doc_ref: DocRef,
    registry: EntityRegistry | None = None,
) -> WriteResult:
    """
    Delete by primary key.

    Returns:
        WriteResult; affected_rows == 0 when the id does not exist

    Raises:
        UnknownCollection: If the collection is not registered
    """
    table = (registry or get_registry()).table_for(doc_ref.collection_name)
    stmt = statements.delete(table, doc_ref.doc_id)
    return await storage.execute(stmt.sql, stmt.params)
