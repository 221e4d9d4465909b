"""
Storage layer for solidkit.

Provides the RelationshipBrowser abstraction and two interchangeable
stores behind it.
"""

from solidkit.storage.engine import RelationshipBrowser, Relationships
from solidkit.storage.sqlite import SQLiteRelationships

__all__ = [
    "RelationshipBrowser",
    "Relationships",
    "SQLiteRelationships",
]
