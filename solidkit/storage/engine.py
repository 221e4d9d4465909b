"""
Relationship storage for solidkit.

This module provides the query abstraction the reporting layer depends on,
together with the default in-memory store:

- RelationshipBrowser: the capability "can find children of a person"
- Relationships: append-only list of facts held in memory

Design Philosophy:
    High-level code (Research) depends on RelationshipBrowser, never on a
    concrete store. Any store that answers find_all_children_of() can be
    swapped in without touching the reporting code.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import RLock

from solidkit.core.models import Person, Relationship, RelationshipFact

logger = logging.getLogger(__name__)


class RelationshipBrowser(ABC):
    """
    Abstract query interface over a family tree.

    Implementations:
        - Relationships: in-memory store
        - SQLiteRelationships: SQLite-backed store
    """

    @abstractmethod
    def find_all_children_of(self, name: str) -> list[Person]:
        """
        Find every person recorded as a child of `name`.

        Args:
            name: Parent's name

        Returns:
            Children in storage order; empty if none are recorded
        """
        pass


class Relationships(RelationshipBrowser):
    """
    In-memory relationship store.

    Facts are appended and never modified. Adding a parent/child pair
    records two facts: (parent, PARENT, child) and (child, CHILD, parent).

    Thread Safety:
        Mutations and scans are guarded by a reentrant lock.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._lock = RLock()
        self._facts: list[RelationshipFact] = []

    @property
    def relations(self) -> tuple[RelationshipFact, ...]:
        """All stored facts, in insertion order."""
        with self._lock:
            return tuple(self._facts)

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        """Record that `parent` is a parent of `child`, and the converse."""
        with self._lock:
            self._facts.append(
                RelationshipFact(subject=parent, relationship=Relationship.PARENT, target=child)
            )
            self._facts.append(
                RelationshipFact(subject=child, relationship=Relationship.CHILD, target=parent)
            )
        logger.debug(f"Recorded {parent.name} as parent of {child.name}")

    def find_all_children_of(self, name: str) -> list[Person]:
        """Scan all facts for (name, PARENT, child)."""
        return self._find_targets(name, Relationship.PARENT)

    def find_all_parents_of(self, name: str) -> list[Person]:
        """Scan all facts for (name, CHILD, parent)."""
        return self._find_targets(name, Relationship.CHILD)

    def _find_targets(self, name: str, relationship: Relationship) -> list[Person]:
        with self._lock:
            return [
                fact.target
                for fact in self._facts
                if fact.subject.name == name and fact.relationship == relationship
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._facts)

    def clear(self) -> None:
        """Clear all facts (for testing)."""
        with self._lock:
            self._facts.clear()
