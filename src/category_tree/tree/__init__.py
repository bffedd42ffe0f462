"""Tree subpackage for category tree primitives.

Re-exports the public API for the tree module:
- Category: frozen dataclass representing a node in the category tree
- Property: frozen property descriptor (value, sticky, excluded)
- Cursor: navigable, editable location inside an immutable tree
- TreeBuilder: builds a tree from flat (path, properties) entries
"""

from category_tree.tree.builder import TreeBuilder
from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Category, Property
from category_tree.tree.paths import canonical_path, split_path

__all__ = [
    "Category",
    "Cursor",
    "Property",
    "TreeBuilder",
    "canonical_path",
    "split_path",
]
