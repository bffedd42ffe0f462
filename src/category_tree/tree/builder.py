"""TreeBuilder: builds a category tree from a flat collection of entries.

Each entry names a path and its properties. Entries are applied one at a
time: the path is resolved from the root with creation enabled, the target's
properties are overwritten, and the next entry continues from the root of the
partially built tree. Missing ancestors are created with empty properties, so
the order of entries does not affect the final set of paths:

    [("a/b", {}), ("a", {...})]   and   [("a", {...}), ("a/b", {})]

both produce "/" -> "/a" -> "/a/b" with the same properties on "/a".

Accepted entry shapes:
- a 2-tuple ``(path, properties)``
- a mapping with a ``"path"`` key and an optional ``"properties"`` (or
  ``"props"``) mapping
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, cast

from category_tree.algorithm.config import TreeConfig
from category_tree.algorithm.resolver import PathResolver
from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Category

__all__ = ["Entry", "TreeBuilder", "normalize_entry"]

# Type alias for a single tree definition entry
Entry = tuple[str, Mapping[str, Any]] | Mapping[str, Any]


def normalize_entry(entry: Entry) -> tuple[str, Mapping[str, Any]]:
    """Return ``(path, properties)`` for any accepted entry shape.

    Raises:
        ValueError: If a mapping entry has no string ``path``.
        TypeError:  If the entry is neither a mapping nor a 2-tuple.
    """
    if isinstance(entry, Mapping):
        path = entry.get("path")
        if not isinstance(path, str):
            msg = f"entry has no string 'path': {entry!r}"
            raise ValueError(msg)
        properties = entry.get("properties", entry.get("props")) or {}
        return path, properties

    if isinstance(entry, tuple) and len(entry) == 2:
        path, properties = entry
        return path, properties or {}

    raise TypeError(f"Unsupported entry type: {type(entry)!r}")


@dataclass
class TreeBuilder:
    """Builds a Category tree from ``(path, properties)`` entries.

    Example::
        builder = TreeBuilder()
        root = builder.build([("electronics/phones", {"warranty": {"value": 2}})])
        # root: "/" -> "/electronics" -> "/electronics/phones"
    """

    config: TreeConfig = field(default_factory=TreeConfig)

    def __post_init__(self) -> None:
        self._resolver = PathResolver(self.config)

    def build(self, entries: Iterable[Entry]) -> Category:
        """Fold ``entries`` into a new tree rooted at ``config.root_path``.

        Args:
            entries: Entries in any order.

        Returns:
            The root Category of the built tree.
        """
        cursor = Cursor.from_root(Category(self.config.root_path))
        for entry in entries:
            path, properties = normalize_entry(entry)
            cursor = self.insert(cursor, path, properties).top()
        return cursor.root()

    def insert(
        self, cursor: Cursor, path: str, properties: Mapping[str, Any]
    ) -> Cursor:
        """Resolve ``path`` with creation and overwrite its properties.

        Returns:
            A cursor focused on the created (or updated) node.
        """
        # create=True never fails to resolve
        target = cast(Cursor, self._resolver.resolve(cursor, path, create=True))
        return target.edit(Category.with_properties, properties)
