"""
Core domain models for solidkit.

This module defines the plain data the three demonstrations operate on:

- Person / Relationship / RelationshipFact: the family tree used by the
  dependency inversion example
- Color / Size / Product: the catalogue used by the open/closed example

Design Philosophy:
    Models carry data only. Querying, filtering and persistence live in
    separate modules so each can change without touching the others.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

import ulid
from pydantic import BaseModel, Field, field_validator


def generate_id() -> str:
    """Generate a unique, sortable ID using ULID."""
    return str(ulid.new())


class Relationship(str, Enum):
    """Kinds of relationship between two people."""

    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"  # Reserved: never inserted or queried


class Person(BaseModel):
    """A person, identified by name alone."""

    name: str = Field(..., description="Person's name")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not empty."""
        if not v or not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()

    def __str__(self) -> str:
        return self.name


class RelationshipFact(BaseModel):
    """
    One directed (subject, relationship, target) record.

    Facts are immutable once stored. "John is parent of Chris" and
    "Chris is child of John" are two separate facts.
    """

    id: str = Field(default_factory=generate_id, description="Unique fact identifier")
    subject: Person = Field(..., description="Person the fact is about")
    relationship: Relationship = Field(..., description="Kind of relationship")
    target: Person = Field(..., description="Person on the other end")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the fact was recorded"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    def as_tuple(self) -> tuple[Person, Relationship, Person]:
        """Return the fact as a plain (subject, relationship, target) triple."""
        return (self.subject, self.relationship, self.target)


class Color(str, Enum):
    """Product colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    """Product sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Product(BaseModel):
    """A catalogue item with a color and a size."""

    name: str = Field(..., description="Product name")
    color: Color = Field(..., description="Product color")
    size: Size = Field(..., description="Product size")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not empty."""
        if not v or not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()
