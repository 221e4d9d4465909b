"""
Journal layer for solidkit.

Journal records entries; PersistenceManager stores them. Neither knows
about the other's internals.
"""

from solidkit.journal.journal import Journal
from solidkit.journal.persistence import PersistenceError, PersistenceManager

__all__ = [
    "Journal",
    "PersistenceManager",
    "PersistenceError",
]
