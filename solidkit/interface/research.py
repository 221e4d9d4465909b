"""
Research: the high-level reporting module of the dependency inversion example.

Research receives a RelationshipBrowser and never learns which store is
behind it. Replacing Relationships with SQLiteRelationships, or any other
implementation, requires no change here.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from solidkit.storage.engine import RelationshipBrowser

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "John"


class Research:
    """
    Reports the children of one person on construction.

    Usage:
        ```python
        Research(relationships)
        # John has a child called Chris
        # John has a child called Matt
        ```
    """

    def __init__(
        self,
        browser: RelationshipBrowser,
        name: str = DEFAULT_SUBJECT,
        out: Optional[TextIO] = None,
    ):
        """
        Query `browser` and print one line per child of `name`.

        Args:
            browser: Anything implementing RelationshipBrowser
            name: Person whose children are reported
            out: Stream to print to; defaults to sys.stdout at call time
        """
        self.name = name
        self.lines: list[str] = []

        out = out if out is not None else sys.stdout
        children = browser.find_all_children_of(name)
        logger.debug(f"{type(browser).__name__} returned {len(children)} children of {name}")

        for child in children:
            line = f"{name} has a child called {child.name}"
            self.lines.append(line)
            print(line, file=out)
