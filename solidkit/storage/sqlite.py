"""
SQLite relationship store for solidkit.

A second RelationshipBrowser implementation that keeps facts in a SQLite
database instead of a Python list. The reporting layer cannot tell the
difference; that is the point of depending on RelationshipBrowser.

Schema Design:
    - facts: one row per directed fact, ordered by rowid (insertion order)
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from solidkit.core.models import Person, Relationship, RelationshipFact
from solidkit.storage.engine import RelationshipBrowser

logger = logging.getLogger(__name__)


class SQLiteRelationships(RelationshipBrowser):
    """
    SQLite-backed relationship store.

    Usage:
        ```python
        store = SQLiteRelationships("./family.db")
        store.add_parent_and_child(Person(name="John"), Person(name="Chris"))
        store.find_all_children_of("John")  # [Person(name='Chris')]
        store.close()
        ```

    Thread Safety:
        File databases use one connection per thread. An in-memory database
        uses a single shared connection so every thread sees the same facts.
        All access is serialized via a reentrant lock.
    """

    def __init__(self, db_path: str | Path = ":memory:", timeout: float = 30.0):
        """
        Initialize SQLite storage.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
            timeout: Connection timeout in seconds
        """
        self._db_path = str(db_path)
        self._timeout = timeout
        self._lock = threading.RLock()

        # Thread-local connections, or one shared connection for ":memory:"
        self._local = threading.local()
        self._shared_conn: Optional[sqlite3.Connection] = None
        self._connections: list[sqlite3.Connection] = []

        self._init_schema()

    @property
    def is_in_memory(self) -> bool:
        return self._db_path == ":memory:"

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            self._db_path,
            timeout=self._timeout,
            check_same_thread=False,
        )
        conn.row_factory = sqlite3.Row
        with self._lock:
            self._connections.append(conn)
        return conn

    def _get_connection(self) -> sqlite3.Connection:
        """Get the shared in-memory connection or a thread-local one."""
        if self.is_in_memory:
            with self._lock:
                if self._shared_conn is None:
                    self._shared_conn = self._connect()
                return self._shared_conn

        if getattr(self._local, "conn", None) is None:
            self._local.conn = self._connect()
        return self._local.conn

    @contextmanager
    def _transaction(self):
        """Context manager for database transactions."""
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def _init_schema(self) -> None:
        """Initialize database schema."""
        with self._lock:
            with self._transaction() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS facts (
                        seq INTEGER PRIMARY KEY AUTOINCREMENT,
                        id TEXT NOT NULL UNIQUE,
                        subject TEXT NOT NULL,
                        relationship TEXT NOT NULL,
                        target TEXT NOT NULL,
                        created_at TEXT NOT NULL
                    )
                """)
                conn.execute("""
                    CREATE INDEX IF NOT EXISTS idx_subject_relationship
                    ON facts(subject, relationship)
                """)

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        """Record that `parent` is a parent of `child`, and the converse."""
        facts = [
            RelationshipFact(subject=parent, relationship=Relationship.PARENT, target=child),
            RelationshipFact(subject=child, relationship=Relationship.CHILD, target=parent),
        ]
        with self._lock:
            with self._transaction() as conn:
                conn.executemany("""
                    INSERT INTO facts (id, subject, relationship, target, created_at)
                    VALUES (?, ?, ?, ?, ?)
                """, [
                    (
                        fact.id,
                        fact.subject.name,
                        fact.relationship.value,
                        fact.target.name,
                        fact.created_at.isoformat(),
                    )
                    for fact in facts
                ])
        logger.debug(f"Recorded {parent.name} as parent of {child.name} in {self._db_path}")

    def find_all_children_of(self, name: str) -> list[Person]:
        """Select targets of (name, PARENT, *) facts in insertion order."""
        return self._find_targets(name, Relationship.PARENT)

    def find_all_parents_of(self, name: str) -> list[Person]:
        """Select targets of (name, CHILD, *) facts in insertion order."""
        return self._find_targets(name, Relationship.CHILD)

    def _find_targets(self, name: str, relationship: Relationship) -> list[Person]:
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT target FROM facts WHERE subject = ? AND relationship = ? ORDER BY seq",
                (name, relationship.value),
            ).fetchall()
        return [Person(name=row["target"]) for row in rows]

    def __len__(self) -> int:
        with self._lock:
            return self._get_connection().execute("SELECT COUNT(*) FROM facts").fetchone()[0]

    def close(self) -> None:
        """Close every connection opened by any thread."""
        with self._lock:
            for conn in self._connections:
                conn.close()
            self._connections.clear()
            self._shared_conn = None
            self._local = threading.local()
