"""
Query layer for solidkit.

Specifications describe which items match; filters apply them.
"""

from solidkit.query.specification import (
    AndSpecification,
    ColorSpecification,
    NotSpecification,
    OrSpecification,
    SizeSpecification,
    Specification,
)
from solidkit.query.filter import BetterFilter, Filter, ProductFilter

__all__ = [
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "Filter",
    "BetterFilter",
    "ProductFilter",
]
