"""
Persistence for journals.

PersistenceManager writes a journal to a plain text file, one entry per
line, and reads it back. Any I/O or encoding failure is raised as
PersistenceError instead of being ignored. Saves go through a sibling
".<name>.tmp" file that replaces the destination only once fully written,
so a failed save leaves the previous content in place.

File format:
    UTF-8, "<index>: <text>" per line, every line newline-terminated,
    no header or footer. Only LF separates records; a CR stays inside
    its entry.
"""

from __future__ import annotations

import logging
from pathlib import Path

from solidkit.journal.journal import Journal

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when a journal cannot be written to or read from a destination."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot persist journal at {self.path}: {reason}")


class PersistenceManager:
    """
    Saves and loads journals.

    Usage:
        ```python
        PersistenceManager.save(journal, "diary.txt")
        lines = PersistenceManager.load("diary.txt")
        ```
    """

    ENCODING = "utf-8"

    @staticmethod
    def save(journal: Journal, filename: str | Path) -> Path:
        """
        Write every entry of `journal` to `filename`, replacing its contents.

        Args:
            journal: Journal to save; not modified
            filename: Destination file

        Returns:
            Path that was written

        Raises:
            PersistenceError: If the destination cannot be written
        """
        path = Path(filename)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            data = "".join(f"{entry}\n" for entry in journal.entries).encode(PersistenceManager.ENCODING)
            tmp_path.write_bytes(data)
            tmp_path.replace(path)
        except (OSError, UnicodeError) as e:
            tmp_path.unlink(missing_ok=True)
            logger.error(f"Failed to save journal '{journal.title}' to {path}: {e}")
            raise PersistenceError(path, str(e)) from e

        logger.info(f"Saved {len(journal)} entries of '{journal.title}' to {path}")
        return path

    @staticmethod
    def load(filename: str | Path) -> list[str]:
        """
        Read back the entries saved in `filename`.

        Raises:
            PersistenceError: If the file cannot be read
        """
        path = Path(filename)
        try:
            with path.open("r", encoding=PersistenceManager.ENCODING, newline="\n") as f:
                return [line.rstrip("\n") for line in f]
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to load journal from {path}: {e}")
            raise PersistenceError(path, str(e)) from e
