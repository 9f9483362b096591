"""
Result and reference types of the document surface.

Exports:
  - CollectionRef, DocRef: Handles naming a collection / one document
  - Snapshot, QueryResult: Read results
  - Page: Paginated listing result
  - UserProfile: Password-free user view
"""

from astrogrid.models.documents import CollectionRef, DocRef, Page, QueryResult, Snapshot
from astrogrid.models.user import UserProfile

__all__ = ["CollectionRef", "DocRef", "Page", "QueryResult", "Snapshot", "UserProfile"]
