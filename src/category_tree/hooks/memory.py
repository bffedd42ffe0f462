"""InMemoryHook: dependency-free persistence hook backed by a dict.

Keeps stored categories keyed by path and records every call it receives,
in order, as ``(operation, path)`` pairs.  Deleting a category also drops
every stored descendant, mirroring how ``remove_at`` detaches a whole
subtree while calling the hook once for its root.

This hook satisfies the PersistenceHook Protocol structurally without
inheriting from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from category_tree.tree.nodes import Category


class InMemoryHook:
    """Persistence hook keeping categories in memory.

    Example::

        from category_tree.hooks import InMemoryHook

        hook = InMemoryHook()
        root = create_category(root, "a/b", {"x": 1}, hook=hook)
        hook.stored["/a/b"].properties   # {"x": Property(value=1)}
        hook.calls                       # [("store", "/a/b")]
    """

    def __init__(self) -> None:
        self.stored: dict[str, Category] = {}
        self.calls: list[tuple[str, str]] = []

    def store(self, category: Category) -> None:
        """Record ``category`` under its path, replacing any previous version."""
        self.calls.append(("store", category.path))
        self.stored[category.path] = category

    def delete(self, category: Category) -> None:
        """Forget ``category`` and every stored node of its subtree."""
        self.calls.append(("delete", category.path))
        for node in category.walk():
            self.stored.pop(node.path, None)

    def count(self, operation: str) -> int:
        """Return how many times ``operation`` ("store" or "delete") was called."""
        return sum(1 for op, _ in self.calls if op == operation)
