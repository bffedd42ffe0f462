"""Loader for JSON tree definition files.

A definition is a JSON array of records::

    [
        {"path": "cars", "props": {"wheels": {"value": 4, "sticky": true}}},
        {"path": "cars/sport", "props": {"has_xenons": {"type": "bool", "sticky": true}}}
    ]

where ``path`` is a slash-delimited category path and ``props`` (or
``properties``) maps property names to descriptors.  A descriptor carries
optional ``sticky``/``excluded`` flags; the rest of it is the opaque value
(see ``Property.coerce``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from category_tree.algorithm.config import TreeConfig
from category_tree.api import create_tree
from category_tree.tree.nodes import Category, Property, coerce_properties

__all__ = ["from_file", "load_entries", "parse_entries"]

logger = logging.getLogger(__name__)


def parse_entries(data: Any) -> list[tuple[str, dict[str, Property]]]:
    """Validate a decoded definition into ``(path, properties)`` entries.

    Args:
        data: The decoded JSON document.

    Returns:
        Entries in document order, with every property coerced.

    Raises:
        TypeError:  If the document is not a JSON array.
        ValueError: If a record is not an object with a string ``path`` and
                    an object of properties.
    """
    if not isinstance(data, list):
        raise TypeError(f"Tree definition must be a JSON array, got {type(data)!r}")

    entries: list[tuple[str, dict[str, Property]]] = []
    for idx, record in enumerate(data):
        if not isinstance(record, dict) or not isinstance(record.get("path"), str):
            msg = f"record {idx} has no string 'path': {record!r}"
            raise ValueError(msg)
        props = record.get("props", record.get("properties")) or {}
        if not isinstance(props, dict):
            msg = f"record {idx} properties must be an object, got {type(props)!r}"
            raise ValueError(msg)
        entries.append((record["path"], coerce_properties(props)))
    return entries


def load_entries(path: str | Path) -> list[tuple[str, dict[str, Property]]]:
    """Read and validate a UTF-8 JSON tree definition file.

    Raises:
        OSError:             If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    source = Path(path)
    logger.info("Loading categories from %s", source)
    with source.open(encoding="utf-8") as fh:
        data = json.load(fh)
    entries = parse_entries(data)
    logger.debug("Parsed %d category entries from %s", len(entries), source)
    return entries


def from_file(path: str | Path, config: TreeConfig | None = None) -> Category:
    """Build a tree from the definition file at ``path``."""
    return create_tree(load_entries(path), config=config)
