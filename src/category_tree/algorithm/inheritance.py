"""Property inheritance: computes the effective properties of a category.

Given the ancestor chain of a focused node, properties are folded from the
root down to the focus:

- the root's properties are always sticky (nothing above could exclude them);
- a non-sticky property never propagates past its own node;
- a sticky, excluded property removes the key from the accumulated result;
- a sticky, non-excluded property sets the key to its value.

Later (closer) nodes overwrite earlier ones, so the most specific ancestor
wins.  The sticky flag is a propagation directive and never appears in the
result, which maps property names to bare values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Property

__all__ = [
    "PropertyMerger",
    "collect_properties",
    "effective_properties",
    "merge_chain",
    "stickify",
    "sticky_merge",
]


def sticky_merge(acc: dict[str, Any], name: str, prop: Property) -> dict[str, Any]:
    """Fold a single property into ``acc`` according to its flags.

    Args:
        acc:  Accumulated inherited properties, modified in place.
        name: Property name.
        prop: Property descriptor.

    Returns:
        ``acc``, for use in reductions.
    """
    if prop.sticky:
        if prop.excluded:
            acc.pop(name, None)
        else:
            acc[name] = prop.value
    return acc


def stickify(properties: Mapping[str, Property]) -> dict[str, Property]:
    """Return a copy of ``properties`` with every entry marked sticky."""
    return {name: replace(prop, sticky=True) for name, prop in properties.items()}


def merge_chain(chain: Iterable[Mapping[str, Property]]) -> dict[str, Any]:
    """Fold property maps given in root-to-leaf order.

    The first map is the root's and is stickified before folding.
    """
    acc: dict[str, Any] = {}
    for depth, properties in enumerate(chain):
        if depth == 0:
            properties = stickify(properties)
        for name, prop in properties.items():
            sticky_merge(acc, name, prop)
    return acc


def collect_properties(cursor: Cursor) -> dict[str, Any]:
    """Calculate the inherited properties of the node focused by ``cursor``."""
    trail = cursor.trail()
    return merge_chain(node.properties for node in reversed(trail))


def effective_properties(
    inherited: Mapping[str, Any], local: Mapping[str, Property]
) -> dict[str, Any]:
    """Merge a node's own properties over its inherited mapping.

    Every local property applies to the node itself regardless of its sticky
    flag; an excluded one removes the key.
    """
    result = dict(inherited)
    for name, prop in local.items():
        if prop.excluded:
            result.pop(name, None)
        else:
            result[name] = prop.value
    return result


class PropertyMerger:
    """Class form of ``collect_properties`` used by the lookup layer.

    Stateless; one instance may be shared freely.

    Example::

        merger = PropertyMerger()
        merger.collect(cursor)   # {"color": "blue"}
    """

    def collect(self, cursor: Cursor) -> dict[str, Any]:
        """Return the inherited property mapping for ``cursor``'s focus."""
        return collect_properties(cursor)

    def effective(self, cursor: Cursor) -> dict[str, Any]:
        """Return the inherited mapping with the focus' own properties on top."""
        return effective_properties(self.collect(cursor), cursor.node.properties)
