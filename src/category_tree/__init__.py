"""Category tree - hierarchical categories with inheritable properties."""

from __future__ import annotations

from category_tree.algorithm.config import MatchMode, TreeConfig
from category_tree.api import (
    create_category,
    create_tree,
    lookup,
    remove_at,
    update_at,
)
from category_tree.protocols import PersistenceHook
from category_tree.result import LookupResult
from category_tree.session import CategoryTree
from category_tree.tree.nodes import Category, Property

__version__: str = "0.1.0"
__all__: list[str] = [
    "Category",
    "CategoryTree",
    "LookupResult",
    "MatchMode",
    "PersistenceHook",
    "Property",
    "TreeConfig",
    "create_category",
    "create_tree",
    "lookup",
    "remove_at",
    "update_at",
]
