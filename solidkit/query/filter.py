"""
Filters that apply specifications to sequences.

BetterFilter works for any item type and any specification, so it never
needs to change when a new rule is introduced. ProductFilter is the
version it replaces: one hard-coded method per combination of criteria.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from solidkit.core.models import Color, Product, Size
from solidkit.query.specification import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Filter(ABC, Generic[T]):
    """Abstract filter over items of type T."""

    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        """
        Select the items that satisfy a specification.

        Args:
            items: Items to scan; not modified
            spec: Specification each item is checked against

        Returns:
            Matching items in their original order
        """
        pass


class BetterFilter(Filter[T]):
    """Linear-scan filter driven entirely by the specification."""

    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        items = list(items)
        result = [item for item in items if spec.is_satisfied(item)]
        logger.debug(f"{spec!r} matched {len(result)} of {len(items)} items")
        return result


class ProductFilter:
    """
    Product filter with one method per criterion.

    Every new criterion, or combination of criteria, needs a new method
    here. Kept for comparison with BetterFilter.
    """

    def by_color(self, items: Iterable[Product], color: Color) -> list[Product]:
        return [item for item in items if item.color == color]

    def by_size(self, items: Iterable[Product], size: Size) -> list[Product]:
        return [item for item in items if item.size == size]

    def by_size_and_color(
        self,
        items: Iterable[Product],
        size: Size,
        color: Color,
    ) -> list[Product]:
        return [item for item in items if item.size == size and item.color == color]
