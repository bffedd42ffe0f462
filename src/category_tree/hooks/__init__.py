"""Hooks subpackage for category-tree.

The package ships only ``InMemoryHook`` — a dict-backed hook with no external
dependencies, used for tests and for embedding the tree in a process that
persists elsewhere.  Real storage is provided by the caller as any object
satisfying the ``PersistenceHook`` Protocol structurally.
"""

from category_tree.hooks.memory import InMemoryHook

__all__ = ["InMemoryHook"]
