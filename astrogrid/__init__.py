"""
AstroGrid document adapter.

Document-collection style access (collections, documents, constraints,
snapshots) over a relational store with fixed table schemas.
"""

__version__ = "0.1.0"
