"""
Pytest configuration and shared fixtures for solidkit tests.

This module provides the sample family, catalogue and journal data used
across test modules.
"""

import logging

import pytest

from solidkit.core.logger import LOGGER_NAME
from solidkit.core.models import Color, Person, Product, Size
from solidkit.core.sequence import default_sequence
from solidkit.storage.engine import Relationships
from solidkit.storage.sqlite import SQLiteRelationships


# =============================================================================
# Family Fixtures
# =============================================================================

@pytest.fixture
def john():
    """The parent in the sample family."""
    return Person(name="John")


@pytest.fixture
def children():
    """John's two children."""
    return [Person(name="Chris"), Person(name="Matt")]


@pytest.fixture
def relationships(john, children):
    """An in-memory store holding John and his children."""
    store = Relationships()
    for child in children:
        store.add_parent_and_child(john, child)
    yield store
    store.clear()


@pytest.fixture
def sqlite_relationships(tmp_path, john, children):
    """A SQLite store holding John and his children."""
    store = SQLiteRelationships(tmp_path / "family.db")
    for child in children:
        store.add_parent_and_child(john, child)
    yield store
    store.close()


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path):
    """An empty store of each kind."""
    if request.param == "memory":
        store = Relationships()
        yield store
        store.clear()
    else:
        store = SQLiteRelationships(tmp_path / "any.db")
        yield store
        store.close()


# =============================================================================
# Product Fixtures
# =============================================================================

@pytest.fixture
def apple():
    return Product(name="Apple", color=Color.GREEN, size=Size.SMALL)


@pytest.fixture
def tree():
    return Product(name="Tree", color=Color.GREEN, size=Size.LARGE)


@pytest.fixture
def house():
    return Product(name="House", color=Color.BLUE, size=Size.LARGE)


@pytest.fixture
def products(apple, tree, house):
    """The three-product catalogue from the open/closed demo."""
    return [apple, tree, house]


@pytest.fixture
def catalogue():
    """A larger catalogue covering every color and size."""
    return [
        Product(name=f"{color.value}-{size.value}", color=color, size=size)
        for color in Color
        for size in Size
    ]


# =============================================================================
# Journal Fixtures
# =============================================================================

@pytest.fixture
def fresh_default_sequence():
    """Reset the process-wide sequence before and after a test."""
    default_sequence().reset()
    yield default_sequence()
    default_sequence().reset()


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that run a full demo"
    )
