"""
Composable specifications for solidkit.

A Specification is a named, pure predicate over one item. Specifications
combine with & (and), | (or) and ~ (not) into new specifications, so new
filtering rules are added by writing a class, not by editing a filter.

Usage:
    ```python
    green = ColorSpecification(Color.GREEN)
    large = SizeSpecification(Size.LARGE)
    spec = green & large
    spec.is_satisfied(tree)  # True
    ```

Ownership:
    Composites keep ordinary references to their operands, so an operand
    lives at least as long as any composite built from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from solidkit.core.models import Color, Product, Size


T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Abstract predicate over items of type T."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return True if `item` meets this specification."""
        pass

    def __and__(self, other: Specification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: Specification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """Satisfied iff both operands are. Evaluates left to right, lazily."""

    def __init__(self, first: Specification[T], second: Specification[T]):
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"({self.first!r} & {self.second!r})"


class OrSpecification(Specification[T]):
    """Satisfied iff at least one operand is."""

    def __init__(self, first: Specification[T], second: Specification[T]):
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) or self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"({self.first!r} | {self.second!r})"


class NotSpecification(Specification[T]):
    """Satisfied iff the wrapped specification is not."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied(self, item: T) -> bool:
        return not self.spec.is_satisfied(item)

    def __repr__(self) -> str:
        return f"~{self.spec!r}"


class ColorSpecification(Specification[Product]):
    """Matches products of one color."""

    def __init__(self, color: Color):
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value})"


class SizeSpecification(Specification[Product]):
    """Matches products of one size."""

    def __init__(self, size: Size):
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value})"
