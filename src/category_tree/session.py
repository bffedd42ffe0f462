"""CategoryTree: the active-tree handle that wires the API to one mutable root.

This is the stateful layer on top of the pure functions in ``api``.  It holds
the current root, the injected persistence hook and the resolution config,
and commits the root returned by each operation only when the operation
returns normally.

Architecture:
- Each mutating call delegates to the matching ``api`` function with the
  current root and swaps in the returned root.  A hook failure propagates
  before the swap, so the handle keeps its previous root.
- ``lookup`` results are memoised per canonical path in a per-instance
  ``LookupCache`` (LRU); every path that addresses the root itself shares one
  key.  The cache is cleared on every root change; results never outlive the
  snapshot they were computed from, and each caller gets its own copy.
- The handle is not thread-safe.  Callers serialise access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from category_tree import api
from category_tree.algorithm.config import TreeConfig
from category_tree.algorithm.resolver import PathResolver
from category_tree.cache import LookupCache
from category_tree.loader import load_entries
from category_tree.tree.nodes import Category
from category_tree.tree.paths import canonical_path

if TYPE_CHECKING:
    from category_tree.protocols import PersistenceHook
    from category_tree.result import LookupResult
    from category_tree.tree.builder import Entry

__all__ = ["CategoryTree"]

logger = logging.getLogger(__name__)


class CategoryTree:
    """Handle on the active category tree.

    Two separate ``CategoryTree`` instances never share state — each holds
    its own root and its own ``LookupCache``.

    Example::

        from category_tree import CategoryTree
        from category_tree.hooks import InMemoryHook

        tree = CategoryTree.load([("cars", {"wheels": {"value": 4, "sticky": True}})])
        tree.create_category("cars/sport", {"seats": 2})
        tree.lookup("cars/sport").inherited   # {"wheels": 4}
    """

    def __init__(
        self,
        root: Category | None = None,
        *,
        hook: PersistenceHook | None = None,
        config: TreeConfig | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the handle.

        Args:
            root:   Initial root.  Defaults to an empty root at
                    ``config.root_path``.
            hook:   Persistence hook passed to every mutating operation.
            config: Resolution parameters.  Defaults to ``TreeConfig()``.
            max_cache_size: Maximum number of memoised lookups.  This is an
                infrastructure parameter — it is NOT part of ``TreeConfig``
                (which governs resolution behaviour only).
        """
        self._config: TreeConfig = config if config is not None else TreeConfig()
        self._root: Category = (
            root if root is not None else Category(self._config.root_path)
        )
        self._hook = hook
        self._resolver = PathResolver(self._config)
        self._cache = LookupCache(max_size=max_cache_size)

    @classmethod
    def load(
        cls,
        entries: Iterable[Entry],
        *,
        hook: PersistenceHook | None = None,
        config: TreeConfig | None = None,
        max_cache_size: int = 256,
    ) -> CategoryTree:
        """Build a handle on a tree created from ``(path, properties)`` entries."""
        root = api.create_tree(entries, config=config)
        return cls(root, hook=hook, config=config, max_cache_size=max_cache_size)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        hook: PersistenceHook | None = None,
        config: TreeConfig | None = None,
        max_cache_size: int = 256,
    ) -> CategoryTree:
        """Build a handle on a tree read from a JSON definition file."""
        return cls.load(
            load_entries(path), hook=hook, config=config, max_cache_size=max_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Category:
        """The current root snapshot."""
        return self._root

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def cache(self) -> LookupCache:
        return self._cache

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def replace(self, root: Category) -> None:
        """Swap the active tree for ``root`` wholesale."""
        self._root = root
        self._cache.clear()

    def reset(self) -> None:
        """Drop the active tree, leaving an empty root."""
        logger.debug("Resetting category tree")
        self.replace(Category(self._config.root_path))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def lookup(
        self,
        path: str | None,
        *,
        sort_key: Callable[[Category], Any] | None = None,
    ) -> LookupResult | None:
        """Look up ``path`` in the active tree (see ``api.lookup``).

        Lookups without a ``sort_key`` are served from the cache when possible.
        """
        if sort_key is not None:
            return api.lookup(self._root, path, sort_key=sort_key, config=self._config)

        key = self._cache_key(path)
        hit, result = self._cache.get(key)
        if hit:
            return result
        result = api.lookup(self._root, path, config=self._config)
        self._cache.put(key, result)
        return result

    def create_category(
        self,
        path: str,
        properties: Mapping[str, Any] | None = None,
        children: Sequence[Category] | None = None,
    ) -> Category:
        """Create or overwrite the category at ``path`` and commit the result."""
        root = api.create_category(
            self._root,
            path,
            properties,
            children,
            hook=self._hook,
            config=self._config,
        )
        self._commit(root)
        return root

    def remove_at(self, path: str | None) -> Category:
        """Remove the category at ``path`` and commit the result."""
        root = api.remove_at(self._root, path, hook=self._hook, config=self._config)
        self._commit(root)
        return root

    def update_at(
        self,
        path: str,
        new_path: str | None,
        properties: Mapping[str, Any] | None = None,
    ) -> Category:
        """Move the category at ``path`` to ``new_path`` and commit the result."""
        root = api.update_at(
            self._root,
            path,
            new_path,
            properties,
            hook=self._hook,
            config=self._config,
        )
        self._commit(root)
        return root

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.lookup(path) is not None

    def _cache_key(self, path: str | None) -> str:
        # "" never collides with a canonical path, which always starts
        # with the separator.
        if self._resolver.names_focus(self._root.path, path):
            return ""
        return canonical_path(path, self._config.separator)

    def _commit(self, root: Category) -> None:
        if root is not self._root:
            self.replace(root)
