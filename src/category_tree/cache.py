"""LookupCache: LRU-backed memo of lookup results for one tree snapshot.

Caches the outcome of ``lookup`` per lookup key, including misses (stored
as None).  The owner clears the cache whenever the tree it describes is
replaced; entries are never valid across two roots.  LRU eviction occurs
silently when ``max_size`` is exceeded — no error is raised.

Each ``LookupCache`` instance maintains its own ``LRUCache`` — there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from category_tree.cache import LookupCache

    cache = LookupCache(max_size=128)
    cache.put("/a", result)
    cache.get("/a")        # (True, copy of result)
    cache.get("/b")        # (False, None)
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from category_tree.result import LookupResult


def _detached(result: LookupResult | None) -> LookupResult | None:
    """Return a copy of ``result`` sharing none of its mutable containers."""
    if result is None:
        return None
    return replace(
        result,
        children=list(result.children),
        inherited=dict(result.inherited),
        local=dict(result.local),
    )


class LookupCache:
    """LRU cache of ``LookupResult | None`` keyed by canonical path.

    Args:
        max_size: Maximum number of paths to remember.  Defaults to 256.
            When exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[str, LookupResult | None] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, path: str) -> tuple[bool, LookupResult | None]:
        """Return ``(hit, result)`` for ``path``.

        A cached miss is returned as ``(True, None)``; an unknown path as
        ``(False, None)``.  Every hit is a fresh copy, so callers may modify
        what they receive without affecting later hits.
        """
        if path in self._cache:
            return True, _detached(self._cache[path])
        return False, None

    def put(self, path: str, result: LookupResult | None) -> None:
        """Remember a copy of the lookup outcome for ``path``."""
        self._cache[path] = _detached(result)

    def clear(self) -> None:
        """Drop every entry."""
        self._cache.clear()
