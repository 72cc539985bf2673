# datastandard_loader.py
"""
Datastandard Loader

Reads a datastandard JSON document into the dataclasses in models.py.
Absent keys stay None so the report can tell incomplete input apart from empty input.
Entries must be objects and carry string ids and names; anything else is a
DatastandardFormatError.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from logger import get_logger
from models import (
    Attribute,
    AttributeGroup,
    AttributeLink,
    AttributeType,
    Category,
    Datastandard,
    DatastandardFormatError,
)

LOGGER = get_logger(__name__)


def load_datastandard(path: Union[str, Path]) -> Datastandard:
    """Load and parse a datastandard JSON file."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"datastandard not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise DatastandardFormatError(f"{path}: not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise DatastandardFormatError(f"{path}: not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise DatastandardFormatError(f"{path}: top level must be a JSON object, got {type(data).__name__}")
    return parse_datastandard(data)


def parse_datastandard(data: Mapping[str, Any]) -> Datastandard:
    ds = Datastandard(
        id=data.get("id"),
        name=data.get("name"),
        categories=_map_list(data.get("categories"), _parse_category, "categories"),
        attributes=_map_list(data.get("attributes"), _parse_attribute, "attributes"),
        attribute_groups=_map_list(data.get("attributeGroups"), _parse_attribute_group, "attributeGroups"),
    )
    LOGGER.debug(
        "Parsed datastandard %s: %s categories, %s attributes, %s attribute groups",
        ds.id or "<unnamed>",
        _count(ds.categories),
        _count(ds.attributes),
        _count(ds.attribute_groups),
    )
    return ds


# ==========================
# Entity parsing
# ==========================

def _parse_category(d: Dict[str, Any]) -> Category:
    return Category(
        id=_require_str(d, "id", "category"),
        name=_require_str(d, "name", "category"),
        parent_id=d.get("parentId"),
        description=d.get("description"),
        attribute_links=_map_list(d.get("attributeLinks"), _parse_attribute_link, "attributeLinks"),
    )


def _parse_attribute(d: Dict[str, Any]) -> Attribute:
    raw_type = d.get("type") or {}
    if not isinstance(raw_type, dict):
        raise DatastandardFormatError(
            f"attribute '{d.get('id')}': type must be an object, got {type(raw_type).__name__}"
        )
    return Attribute(
        id=_require_str(d, "id", "attribute"),
        name=_require_str(d, "name", "attribute"),
        description=d.get("description"),
        type=AttributeType(id=raw_type.get("id"), multi_value=raw_type.get("multiValue")),
        group_ids=_string_list(d.get("groupIds"), "groupIds"),
        attribute_links=_map_list(d.get("attributeLinks"), _parse_attribute_link, "attributeLinks"),
    )


def _parse_attribute_link(d: Dict[str, Any]) -> AttributeLink:
    return AttributeLink(id=_require_str(d, "id", "attribute link"), optional=d.get("optional"))


def _parse_attribute_group(d: Dict[str, Any]) -> AttributeGroup:
    return AttributeGroup(
        id=_require_str(d, "id", "attribute group"),
        name=_require_str(d, "name", "attribute group"),
    )


# ==========================
# Structural helpers
# ==========================

def _map_list(items: Any, parse, key: str) -> Optional[list]:
    if items is None:
        return None
    if not isinstance(items, list):
        raise DatastandardFormatError(f"{key} must be a list, got {type(items).__name__}")
    out = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise DatastandardFormatError(f"{key}[{idx}] must be an object, got {type(item).__name__}")
        out.append(parse(item))
    return out


def _string_list(items: Any, key: str) -> Optional[List[str]]:
    if items is None:
        return None
    if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
        raise DatastandardFormatError(f"{key} must be a list of strings")
    return list(items)


def _require_str(d: Dict[str, Any], key: str, kind: str) -> str:
    value = d.get(key)
    if not isinstance(value, str):
        raise DatastandardFormatError(f"{kind} {d.get('id', '<no id>')!r} has no {key}")
    return value


def _count(items: Optional[list]) -> str:
    return "no" if items is None else str(len(items))
