"""
Core building blocks for solidkit.

- models: Person, RelationshipFact, Product and their enums
- sequence: numbering for journal entries
- config: demo settings
- logger: logging setup for entry points
"""

from solidkit.core.models import (
    Color,
    Person,
    Product,
    Relationship,
    RelationshipFact,
    Size,
    generate_id,
)
from solidkit.core.sequence import EntrySequence, default_sequence
from solidkit.core.config import SolidKitConfig
from solidkit.core.logger import configure_logging

__all__ = [
    "Color",
    "Person",
    "Product",
    "Relationship",
    "RelationshipFact",
    "Size",
    "generate_id",
    "EntrySequence",
    "default_sequence",
    "SolidKitConfig",
    "configure_logging",
]
