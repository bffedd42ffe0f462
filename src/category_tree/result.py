"""LookupResult dataclass for category lookup output.

This module provides the result type returned by lookup() calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from category_tree.algorithm.inheritance import effective_properties
from category_tree.tree.nodes import Property

__all__ = ["LookupResult"]


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Result of a successful lookup() call.

    Attributes:
        path:       Identity of the category that was found.
        children:   Paths of its direct children, in insertion order unless a
                    sort key was given to lookup().
        inherited:  Property values inherited through sticky/exclude rules,
                    keyed by name. Includes the node's own sticky properties.
        local:      The node's own raw property descriptors.
    """

    path: str
    children: list[str]
    inherited: dict[str, Any]
    local: Mapping[str, Property] = field(default_factory=dict)

    @property
    def properties(self) -> dict[str, Any]:
        """Effective values: own properties merged over the inherited ones.

        Every local property applies to the node itself, sticky or not; a
        local excluded property removes the key.
        """
        return effective_properties(self.inherited, self.local)
