"""
solidkit - SOLID design principles, one small example each.

Three independent demonstrations:
- Dependency inversion: Research depends on RelationshipBrowser, not a store
- Open/closed: BetterFilter is extended with new Specifications, never edited
- Single responsibility: Journal records entries, PersistenceManager saves them
"""
from solidkit.core.models import (
    Color,
    Person,
    Product,
    Relationship,
    RelationshipFact,
    Size,
)
from solidkit.core.sequence import EntrySequence, default_sequence
from solidkit.core.config import SolidKitConfig
from solidkit.core.logger import configure_logging

# Dependency inversion
from solidkit.storage.engine import RelationshipBrowser, Relationships
from solidkit.storage.sqlite import SQLiteRelationships
from solidkit.interface.research import Research

# Open/closed
from solidkit.query.specification import (
    AndSpecification,
    ColorSpecification,
    NotSpecification,
    OrSpecification,
    SizeSpecification,
    Specification,
)
from solidkit.query.filter import BetterFilter, Filter, ProductFilter

# Single responsibility
from solidkit.journal.journal import Journal
from solidkit.journal.persistence import PersistenceError, PersistenceManager

__version__ = "0.1.0"

__all__ = [
    # Core models
    "Person",
    "Relationship",
    "RelationshipFact",
    "Product",
    "Color",
    "Size",
    # Sequencing
    "EntrySequence",
    "default_sequence",
    # Config and logging
    "SolidKitConfig",
    "configure_logging",
    # Dependency inversion
    "RelationshipBrowser",
    "Relationships",
    "SQLiteRelationships",
    "Research",
    # Open/closed
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "Filter",
    "BetterFilter",
    "ProductFilter",
    # Single responsibility
    "Journal",
    "PersistenceManager",
    "PersistenceError",
]
