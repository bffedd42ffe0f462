"""Category and Property dataclasses for the category tree representation.

Provides the foundational data types navigated by Cursor and populated by
TreeBuilder. Both types are frozen: every edit to a tree produces new nodes
along the spine from the edited node up to the root.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

__all__ = ["Category", "Property", "coerce_properties"]

# Descriptor keys that are propagation directives, never part of a value.
_FLAGS = ("sticky", "excluded")


@dataclass(frozen=True, slots=True)
class Property:
    """A single category property.

    Attributes:
        value:    Opaque property value. Never inspected or validated.
        sticky:   When True the property is inherited by every descendant.
        excluded: When True (together with ``sticky``) the property stops an
                  inherited sticky property of the same name at this node.
    """

    value: Any = None
    sticky: bool = False
    excluded: bool = False

    @classmethod
    def coerce(cls, obj: Any) -> Property:
        """Build a Property from a Property, a descriptor mapping or a bare value.

        Descriptor mappings carry optional ``sticky``/``excluded`` flags.  The
        value is taken from the ``"value"`` key when present; otherwise the
        remaining keys form the value (``{"type": "bool", "sticky": True}``
        yields ``value={"type": "bool"}``), or None when nothing is left.

        Args:
            obj: Anything that describes a property.

        Returns:
            A Property instance.
        """
        if isinstance(obj, Property):
            return obj

        if isinstance(obj, Mapping):
            if "value" in obj:
                value = obj["value"]
            else:
                rest = {k: v for k, v in obj.items() if k not in _FLAGS}
                value = rest or None
            return cls(
                value=value,
                sticky=bool(obj.get("sticky", False)),
                excluded=bool(obj.get("excluded", False)),
            )

        return cls(value=obj)


def coerce_properties(properties: Mapping[str, Any] | None) -> dict[str, Property]:
    """Coerce every entry of a property mapping via ``Property.coerce``."""
    if not properties:
        return {}
    return {name: Property.coerce(prop) for name, prop in properties.items()}


@dataclass(frozen=True, slots=True)
class Category:
    """A node in the category tree.

    Attributes:
        path:       Identity of the node among its siblings. The root is "/".
                    With the default match mode this is the full cumulative
                    path from the root, e.g. "/electronics/phones".
        properties: Local properties keyed by name.
        children:   Child categories in insertion order.
    """

    path: str
    properties: Mapping[str, Property] = field(default_factory=dict)
    children: tuple[Category, ...] = ()

    def with_properties(self, properties: Mapping[str, Any] | None) -> Category:
        """Return a copy of this node with its properties replaced."""
        return replace(self, properties=coerce_properties(properties))

    def with_children(
        self, children: tuple[Category, ...] | list[Category]
    ) -> Category:
        """Return a copy of this node with its children replaced."""
        return replace(self, children=tuple(children))

    def walk(self) -> list[Category]:
        """Return this node and every descendant in depth-first pre-order."""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes
