"""
Entry sequence numbering for journals.

A journal numbers its entries from a sequence. By default every journal in
the process draws from one shared sequence, so two journals interleave their
numbers. Pass a dedicated EntrySequence to a Journal to number it on its own.
"""

from __future__ import annotations

from threading import Lock


class EntrySequence:
    """
    A monotonically increasing integer counter.

    Usage:
        ```python
        seq = EntrySequence()
        seq.next()  # 1
        seq.next()  # 2
        ```
    """

    def __init__(self, start: int = 1):
        """
        Initialize the sequence.

        Args:
            start: First value returned by next()
        """
        self._lock = Lock()
        self._next = start

    @property
    def current(self) -> int:
        """The value the next call to next() will return."""
        with self._lock:
            return self._next

    def next(self) -> int:
        """Return the current value and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self, start: int = 1) -> None:
        """Restart the sequence (for testing)."""
        with self._lock:
            self._next = start


_default_sequence = EntrySequence()


def default_sequence() -> EntrySequence:
    """Return the process-wide sequence shared by journals without their own."""
    return _default_sequence
