"""
Journal: an append-only list of numbered text entries.

The journal only records entries. Saving it is PersistenceManager's job
(see solidkit.journal.persistence), so changes to how journals are stored
never touch this class.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from solidkit.core.sequence import EntrySequence, default_sequence

logger = logging.getLogger(__name__)


class Journal:
    """
    A titled, append-only journal.

    Entries are formatted as "{index}: {text}". Unless given its own
    sequence, a journal draws indices from the process-wide default
    sequence, so numbering continues across journals.

    Usage:
        ```python
        journal = Journal("Dear Diary")
        journal.add("I ate a bug")     # "1: I ate a bug"
        journal.add("I cried today")   # "2: I cried today"
        ```
    """

    def __init__(self, title: str, sequence: Optional[EntrySequence] = None):
        """
        Initialize the journal.

        Args:
            title: Journal title
            sequence: Index source; defaults to the shared process-wide sequence
        """
        self.title = title
        self._sequence = sequence if sequence is not None else default_sequence()
        self._entries: list[str] = []

    @property
    def entries(self) -> tuple[str, ...]:
        """Formatted entries in insertion order."""
        return tuple(self._entries)

    def add(self, text: str) -> str:
        """
        Append a new entry.

        Args:
            text: Entry text; embedded newlines are kept as-is

        Returns:
            The formatted entry
        """
        entry = f"{self._sequence.next()}: {text}"
        self._entries.append(entry)
        logger.debug(f"Journal '{self.title}' added entry {entry!r}")
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __repr__(self) -> str:
        return f"Journal(title={self.title!r}, entries={len(self._entries)})"
