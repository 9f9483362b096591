"""
Document-collection style query surface over the relational store.

Usage:
    from astrogrid.application.adapters import collection, get_docs, order_by, query, where

    result = await get_docs(
        storage,
        query(collection("anomalies"), where("status", "==", "Open"), order_by("timestamp", "desc")),
    )
    for snapshot in result.docs:
        print(snapshot.id, snapshot.data())
"""

from astrogrid.application.adapters.query_builder import (
    Constraint,
    Limit,
    OrderBy,
    QueryDescriptor,
    Where,
    collection,
    doc,
    limit,
    order_by,
    query,
    server_timestamp,
    where,
)
from astrogrid.application.adapters.query_executor import get_docs
from astrogrid.application.adapters.document_accessor import (
    add_doc,
    delete_doc,
    get_doc,
    update_doc,
)

__all__ = [
    "Constraint",
    "Limit",
    "OrderBy",
    "QueryDescriptor",
    "Where",
    "collection",
    "doc",
    "limit",
    "order_by",
    "query",
    "server_timestamp",
    "where",
    "get_docs",
    "add_doc",
    "delete_doc",
    "get_doc",
    "update_doc",
]
