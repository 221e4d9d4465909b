"""
Tests for specifications and filters.
"""

import itertools

import pytest

from solidkit.core.models import Color, Product, Size
from solidkit.query.filter import BetterFilter, Filter, ProductFilter
from solidkit.query.specification import (
    AndSpecification,
    ColorSpecification,
    NotSpecification,
    OrSpecification,
    SizeSpecification,
    Specification,
)


class CountingSpecification(Specification[Product]):
    """Records how often it is consulted."""

    def __init__(self, result: bool):
        self.result = result
        self.calls = 0

    def is_satisfied(self, item: Product) -> bool:
        self.calls += 1
        return self.result


class NameLengthSpecification(Specification[Product]):
    """A rule added without touching BetterFilter."""

    def __init__(self, max_length: int):
        self.max_length = max_length

    def is_satisfied(self, item: Product) -> bool:
        return len(item.name) <= self.max_length


def identity_intersection(first, second):
    ids = {id(x) for x in second}
    return [x for x in first if id(x) in ids]


class TestSpecification:
    """Tests for leaf specifications."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Specification()

    def test_color(self, apple, house):
        green = ColorSpecification(Color.GREEN)
        assert green.is_satisfied(apple)
        assert not green.is_satisfied(house)

    def test_size(self, apple, tree):
        large = SizeSpecification(Size.LARGE)
        assert large.is_satisfied(tree)
        assert not large.is_satisfied(apple)

    def test_repeatable(self, tree):
        spec = ColorSpecification(Color.GREEN)
        assert [spec.is_satisfied(tree) for _ in range(3)] == [True, True, True]


class TestComposition:
    """Tests for &, | and ~."""

    def test_and_operator_builds_and_specification(self):
        green = ColorSpecification(Color.GREEN)
        large = SizeSpecification(Size.LARGE)
        spec = green & large

        assert isinstance(spec, AndSpecification)
        assert spec.first is green
        assert spec.second is large

    def test_and(self, apple, tree, house):
        spec = AndSpecification(ColorSpecification(Color.GREEN), SizeSpecification(Size.LARGE))
        assert [spec.is_satisfied(p) for p in (apple, tree, house)] == [False, True, False]

    def test_and_short_circuits(self, apple):
        """The second operand is not consulted when the first fails."""
        first = CountingSpecification(False)
        second = CountingSpecification(True)

        assert not (first & second).is_satisfied(apple)
        assert first.calls == 1
        assert second.calls == 0

    def test_or(self, apple, tree, house):
        spec = ColorSpecification(Color.BLUE) | SizeSpecification(Size.SMALL)
        assert isinstance(spec, OrSpecification)
        assert [spec.is_satisfied(p) for p in (apple, tree, house)] == [True, False, True]

    def test_not(self, apple, house):
        spec = ~ColorSpecification(Color.GREEN)
        assert isinstance(spec, NotSpecification)
        assert not spec.is_satisfied(apple)
        assert spec.is_satisfied(house)

    def test_operands_outlive_local_names(self, tree):
        """A composite keeps its operands alive after the names are gone."""
        def build():
            green = ColorSpecification(Color.GREEN)
            large = SizeSpecification(Size.LARGE)
            return green & large

        assert build().is_satisfied(tree)

    def test_repr(self):
        spec = ColorSpecification(Color.GREEN) & ~SizeSpecification(Size.SMALL)
        assert repr(spec) == "(ColorSpecification(green) & ~SizeSpecification(small))"


class TestBetterFilter:
    """Tests for BetterFilter."""

    def test_is_a_filter(self):
        assert isinstance(BetterFilter(), Filter)

    def test_green(self, products, apple, tree):
        assert BetterFilter().filter(products, ColorSpecification(Color.GREEN)) == [apple, tree]

    def test_green_and_large(self, products, tree):
        spec = ColorSpecification(Color.GREEN) & SizeSpecification(Size.LARGE)
        result = BetterFilter().filter(products, spec)
        assert len(result) == 1
        assert result[0] is tree

    def test_empty_input(self):
        assert BetterFilter().filter([], ColorSpecification(Color.RED)) == []

    def test_nothing_matches(self, products):
        assert BetterFilter().filter(products, ColorSpecification(Color.RED)) == []

    def test_input_not_modified(self, products):
        before = list(products)
        BetterFilter().filter(products, SizeSpecification(Size.LARGE))
        assert products == before

    def test_accepts_any_iterable(self, products, tree):
        spec = SizeSpecification(Size.LARGE) & ColorSpecification(Color.GREEN)
        assert BetterFilter().filter(iter(products), spec) == [tree]

    def test_new_rule_without_changing_filter(self, products, tree):
        assert BetterFilter().filter(products, NameLengthSpecification(4)) == [tree]

    def test_result_is_ordered_subsequence(self, catalogue):
        """Results keep the original relative order."""
        spec = ~ColorSpecification(Color.RED) | SizeSpecification(Size.MEDIUM)
        result = BetterFilter().filter(catalogue, spec)

        positions = [catalogue.index(x) for x in result]
        assert positions == sorted(positions)
        assert len(result) <= len(catalogue)

    def test_and_is_intersection(self, catalogue):
        bf = BetterFilter()
        for color, size in itertools.product(Color, Size):
            a = ColorSpecification(color)
            b = SizeSpecification(size)
            assert bf.filter(catalogue, a & b) == identity_intersection(
                bf.filter(catalogue, a), bf.filter(catalogue, b)
            )

    def test_and_is_commutative_and_associative(self, catalogue):
        bf = BetterFilter()
        a = ColorSpecification(Color.GREEN)
        b = SizeSpecification(Size.LARGE)
        c = ~SizeSpecification(Size.SMALL)

        assert bf.filter(catalogue, a & b) == bf.filter(catalogue, b & a)
        assert bf.filter(catalogue, (a & b) & c) == bf.filter(catalogue, a & (b & c))


class TestProductFilter:
    """Tests for the per-criterion filter it replaces."""

    def test_by_color(self, products, apple, tree):
        assert ProductFilter().by_color(products, Color.GREEN) == [apple, tree]

    def test_by_size(self, products, tree, house):
        assert ProductFilter().by_size(products, Size.LARGE) == [tree, house]

    def test_by_size_and_color(self, products, tree):
        assert ProductFilter().by_size_and_color(products, Size.LARGE, Color.GREEN) == [tree]

    def test_agrees_with_better_filter(self, catalogue):
        pf = ProductFilter()
        bf = BetterFilter()
        for color, size in itertools.product(Color, Size):
            assert pf.by_size_and_color(catalogue, size, color) == bf.filter(
                catalogue, SizeSpecification(size) & ColorSpecification(color)
            )
