"""Algorithm subpackage: path resolution and property inheritance.

Re-exports the public API for the algorithm module:
- TreeConfig / MatchMode: resolution parameters
- PathResolver: locates (and optionally creates) the node at a path
- PropertyMerger / collect_properties: sticky/exclude property inheritance
"""

from category_tree.algorithm.config import MatchMode, TreeConfig
from category_tree.algorithm.inheritance import PropertyMerger, collect_properties
from category_tree.algorithm.resolver import PathResolver

__all__ = [
    "MatchMode",
    "PathResolver",
    "PropertyMerger",
    "TreeConfig",
    "collect_properties",
]
