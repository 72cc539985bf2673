# models.py
"""
Data structures for the datastandard report.
Contains the core data models and error types used across multiple modules.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class AttributeType:
    """Type descriptor of an attribute."""
    id: str
    multi_value: Optional[bool] = None


@dataclass(frozen=True)
class AttributeLink:
    """Reference to an attribute from a category or a composite attribute."""
    id: str
    optional: Optional[bool] = None   # per-use, not a property of the attribute


@dataclass(frozen=True)
class AttributeGroup:
    id: str
    name: str


@dataclass(frozen=True)
class Attribute:
    """A named, typed data field; composite when it links nested attributes."""
    id: str
    name: str
    type: AttributeType
    description: Optional[str] = None
    group_ids: Optional[List[str]] = field(default_factory=list)
    attribute_links: Optional[List[AttributeLink]] = None

    @property
    def is_composite(self) -> bool:
        return bool(self.attribute_links)


@dataclass(frozen=True)
class Category:
    """A node in the category tree; root categories have no parent_id."""
    id: str
    name: str
    parent_id: Optional[str] = None
    description: Optional[str] = None
    attribute_links: Optional[List[AttributeLink]] = field(default_factory=list)


@dataclass(frozen=True)
class Datastandard:
    """Root container. A None collection means the input was incomplete."""
    categories: Optional[List[Category]] = None
    attributes: Optional[List[Attribute]] = None
    attribute_groups: Optional[List[AttributeGroup]] = None
    id: Optional[str] = None
    name: Optional[str] = None


# ==========================
# Errors
# ==========================

class ReportError(Exception):
    """Base class for errors raised while building a report."""


class DatastandardFormatError(ReportError):
    """The input document cannot be read as a datastandard."""


class InvalidReferenceError(ReportError):
    """An id points at an attribute or attribute group that does not exist."""

    def __init__(self, kind: str, missing_id: str, referenced_by: str):
        self.kind = kind
        self.missing_id = missing_id
        self.referenced_by = referenced_by
        super().__init__(f"Invalid reference: {kind} '{missing_id}' referenced by {referenced_by} does not exist")


class DuplicateIdError(ReportError):
    """Two entities of the same kind share an id."""

    def __init__(self, kind: str, duplicate_id: str):
        self.kind = kind
        self.duplicate_id = duplicate_id
        super().__init__(f"Duplicate {kind} id '{duplicate_id}'")


class CyclicAttributeError(ReportError):
    """A composite attribute contains itself, directly or through nesting."""

    def __init__(self, path: Sequence[str]):
        self.path = list(path)
        super().__init__("Cyclic attribute definition: " + " -> ".join(self.path))
