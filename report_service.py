# report_service.py
"""
Category Report Service

Builds the flat attribute report for a category of a datastandard: the category's
own attribute links followed by those inherited from each ancestor, one row per link.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from config import DEFAULTS, ReportConfig
from logger import get_logger, log_time
from models import (
    Attribute,
    AttributeGroup,
    AttributeLink,
    Category,
    CyclicAttributeError,
    Datastandard,
    DuplicateIdError,
    InvalidReferenceError,
)

LOGGER = get_logger(__name__)

T = TypeVar("T")


def index_by_id(entities: Iterable[T], kind: str = "entity") -> Dict[str, T]:
    """Build an id -> entity lookup table; ids must be unique."""
    table: Dict[str, T] = {}
    for e in entities:
        if e.id in table:
            raise DuplicateIdError(kind, e.id)
        table[e.id] = e
    return table


def ancestor_chain(category_id: str, categories: Dict[str, Category]) -> List[Category]:
    """Return the category followed by its parent, grandparent, ... up to the root."""
    chain: List[Category] = []
    seen = set()
    category = categories.get(category_id)
    while category is not None:
        if category.id in seen:
            LOGGER.warning("Category parent chain loops back to '%s'; stopping there", category.id)
            break
        seen.add(category.id)
        chain.append(category)
        category = categories.get(category.parent_id) if category.parent_id is not None else None
    return chain


class ReportService:
    """Turns a datastandard into header + data rows for one category."""

    def __init__(self, cfg: Optional[ReportConfig] = None):
        self.cfg = cfg or DEFAULTS.report

    # ---------- Public API ----------

    @log_time
    def report(self, datastandard: Optional[Datastandard], category_id: str) -> Iterator[List[str]]:
        """
        Yield the header row, then one row per attribute link of the category and
        of each of its ancestors, nearest first.

        Incomplete input (no datastandard, or a missing collection) yields nothing.
        An unknown category_id yields the header only.
        """
        if datastandard is None or any(
            coll is None
            for coll in (datastandard.categories, datastandard.attributes, datastandard.attribute_groups)
        ):
            LOGGER.warning("Datastandard is missing or incomplete; report for '%s' is empty", category_id)
            return

        category_map = index_by_id(datastandard.categories, "category")
        attribute_map = index_by_id(datastandard.attributes, "attribute")
        attribute_group_map = index_by_id(datastandard.attribute_groups, "attribute group")

        chain = ancestor_chain(category_id, category_map)
        if not chain:
            LOGGER.info("Category '%s' not found; report has no data rows", category_id)
        else:
            LOGGER.debug("Ancestor chain for '%s': %s", category_id, " -> ".join(c.id for c in chain))

        yield list(self.cfg.headers)
        for category in chain:
            yield from self.transform_category(category, attribute_map, attribute_group_map)

    def transform_category(
        self,
        category: Category,
        attr_map: Dict[str, Attribute],
        attr_group_map: Dict[str, AttributeGroup],
    ) -> Iterator[List[str]]:
        for link in category.attribute_links or []:
            yield self.transform_attribute_link(category, link, attr_map, attr_group_map)

    def transform_attribute_link(
        self,
        category: Category,
        link: AttributeLink,
        attr_map: Dict[str, Attribute],
        attr_group_map: Dict[str, AttributeGroup],
    ) -> List[str]:
        attr = self._resolve_attribute(link, attr_map, f"category '{category.id}'")
        return [
            category.name,
            self.attribute_name(attr, link),
            self.attribute_description(attr),
            self.attribute_type(attr, attr_map),
            self.attribute_groups(attr, attr_group_map),
        ]

    # ---------- Field formatting ----------

    def attribute_name(self, attr: Attribute, link: AttributeLink) -> str:
        """Mandatory unless the link says optional=True."""
        return attr.name + ("" if link.optional is True else self.cfg.mandatory_marker)

    def attribute_description(self, attr: Attribute) -> str:
        if attr.description is None or not attr.description.strip():
            return ""
        return attr.description

    def attribute_type(self, attr: Attribute, attr_map: Dict[str, Attribute]) -> str:
        return self._format_type(attr, attr_map, ())

    def attribute_groups(self, attr: Attribute, attr_group_map: Dict[str, AttributeGroup]) -> str:
        names = []
        for group_id in attr.group_ids or []:
            group = attr_group_map.get(group_id)
            if group is None:
                raise InvalidReferenceError("attribute group", group_id, f"attribute '{attr.id}'")
            names.append(group.name)
        return self.cfg.group_separator.join(names)

    # ---------- Internal methods ----------

    def _format_type(self, attr: Attribute, attr_map: Dict[str, Attribute], path: Tuple[str, ...]) -> str:
        type_id = attr.type.id or ""
        suffix = self.cfg.multi_value_suffix if attr.type.multi_value is True else ""
        if not attr.is_composite:
            return type_id + suffix

        if self.cfg.detect_cycles and attr.id in path:
            raise CyclicAttributeError(path + (attr.id,))
        path = path + (attr.id,)

        lines = [type_id + "{"]
        for link in attr.attribute_links:
            nested = self._resolve_attribute(link, attr_map, f"attribute '{attr.id}'")
            nested_type = self._format_type(nested, attr_map, path)
            lines.append(f"{self.cfg.nested_indent}{self.attribute_name(nested, link)}: {nested_type}")
        return "\n".join(lines) + "\n}" + suffix

    def _resolve_attribute(self, link: AttributeLink, attr_map: Dict[str, Attribute], referenced_by: str) -> Attribute:
        attr = attr_map.get(link.id)
        if attr is None:
            raise InvalidReferenceError("attribute", link.id, referenced_by)
        return attr
