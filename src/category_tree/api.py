"""Public API functions for category-tree.

This module provides the five user-facing operations: lookup,
create_category, remove_at, update_at and create_tree.  Every function takes
the current root explicitly and returns a new root (or a result) without
touching any global state; the input tree is never modified.

Persistence is injected: pass any ``PersistenceHook`` as ``hook=`` and it is
called synchronously with the affected node.  Hook errors propagate and no new
root is returned, so the caller's tree stays as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, Any, cast

from category_tree.algorithm.config import MatchMode, TreeConfig
from category_tree.algorithm.inheritance import PropertyMerger
from category_tree.algorithm.resolver import PathResolver
from category_tree.result import LookupResult
from category_tree.tree.builder import Entry, TreeBuilder
from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Category
from category_tree.tree.paths import canonical_path

if TYPE_CHECKING:
    from category_tree.protocols import PersistenceHook

__all__ = ["create_category", "create_tree", "lookup", "remove_at", "update_at"]

logger = logging.getLogger(__name__)

_merger = PropertyMerger()


def _resolver(config: TreeConfig | None) -> PathResolver:
    return PathResolver(config if config is not None else TreeConfig())


def lookup(
    root: Category,
    path: str | None,
    *,
    sort_key: Callable[[Category], Any] | None = None,
    config: TreeConfig | None = None,
) -> LookupResult | None:
    """Find the category at ``path`` and compute its inherited properties.

    Args:
        root:     Root of the tree to search.
        path:     Slash-delimited path ("a/b", "/a/b" and "a/b/" are equivalent).
        sort_key: Optional key applied to each child Category to order the
                  returned child paths.  Insertion order when None.
        config:   Resolution parameters.  Defaults to ``TreeConfig()`` when None.

    Returns:
        A ``LookupResult``, or None when no category exists at ``path``.
    """
    cursor = _resolver(config).resolve(Cursor.from_root(root), path)
    if cursor is None:
        return None

    node = cursor.node
    children = node.children
    if sort_key is not None:
        children = tuple(sorted(children, key=sort_key))

    return LookupResult(
        path=node.path,
        children=[child.path for child in children],
        inherited=_merger.collect(cursor),
        local=dict(node.properties),
    )


def create_category(
    root: Category,
    path: str,
    properties: Mapping[str, Any] | None = None,
    children: Sequence[Category] | None = None,
    *,
    hook: PersistenceHook | None = None,
    config: TreeConfig | None = None,
) -> Category:
    """Create (or overwrite) the category at ``path``.

    Missing ancestors are created with empty properties.  An existing
    category keeps its children unless ``children`` is given.

    Args:
        root:       Root of the tree to edit.
        path:       Slash-delimited path of the category.
        properties: New local properties; each value is coerced with
                    ``Property.coerce``.
        children:   When not None, replaces the category's children.
        hook:       Receives ``store(node)`` with the finalized node.
        config:     Resolution parameters.

    Returns:
        The new root.
    """
    # create=True never fails to resolve
    cursor = cast(
        Cursor, _resolver(config).resolve(Cursor.from_root(root), path, create=True)
    )

    cursor = cursor.edit(Category.with_properties, properties)
    if children is not None:
        cursor = cursor.edit(Category.with_children, children)

    if hook is not None:
        hook.store(cursor.node)
    logger.debug("Created category %s", cursor.node.path)
    return cursor.root()


def remove_at(
    root: Category,
    path: str | None,
    *,
    hook: PersistenceHook | None = None,
    config: TreeConfig | None = None,
) -> Category:
    """Remove the category at ``path`` together with its subtree.

    The hook's ``delete`` is called once, with the subtree root, before the
    subtree is detached.

    Returns:
        The new root, or ``root`` itself when nothing exists at ``path``.

    Raises:
        ValueError: When ``path`` names the root.
    """
    cursor = _resolver(config).resolve(Cursor.from_root(root), path)
    if cursor is None:
        return root
    if cursor.is_root:
        msg = f"cannot remove the root category {cursor.node.path!r}"
        raise ValueError(msg)

    if hook is not None:
        hook.delete(cursor.node)
    logger.debug("Removed category %s", cursor.node.path)
    return cursor.remove().root()


def update_at(
    root: Category,
    path: str,
    new_path: str | None,
    properties: Mapping[str, Any] | None = None,
    *,
    hook: PersistenceHook | None = None,
    config: TreeConfig | None = None,
) -> Category:
    """Move the category at ``path`` (and its subtree) to ``new_path``.

    The category is removed and then created at ``new_path`` with its
    original properties (or ``properties`` when given) and its subtree
    reattached.  Ancestors of ``new_path`` are created when missing.  Under
    ``MatchMode.PATH`` the identities of the moved descendants are rewritten
    to live under the new path.

    A category already living at ``new_path`` is displaced: it is removed
    with its whole subtree, and the hook receives ``delete`` for it, before
    the moved category takes its place.  The hook therefore sees
    ``delete(old)``, then ``delete(displaced)`` when there is one, then
    ``store(new)``.

    Returns:
        The new root; ``root`` itself when ``new_path`` is empty, names the
        same category as ``path``, or ``path`` does not exist.

    Raises:
        ValueError: When ``new_path`` names the root.
    """
    cfg = config if config is not None else TreeConfig()
    sep = cfg.separator
    if not new_path or canonical_path(new_path, sep) == canonical_path(path, sep):
        return root

    resolver = _resolver(cfg)
    cursor = resolver.resolve(Cursor.from_root(root), path)
    if cursor is None:
        return root
    if resolver.names_focus(root.path, new_path):
        msg = f"cannot move {cursor.node.path!r} onto the root category"
        raise ValueError(msg)

    node = cursor.node
    carried = node.properties if properties is None else properties
    children = node.children
    if cfg.match_mode is MatchMode.PATH:
        target = resolver.identity_for(root.path, new_path)
        children = _rebase(children, node.path, target)

    logger.debug("Moving category %s to %s", node.path, new_path)
    root = remove_at(root, path, hook=hook, config=cfg)
    if resolver.resolve(Cursor.from_root(root), new_path) is not None:
        logger.debug("Displacing existing category at %s", new_path)
        root = remove_at(root, new_path, hook=hook, config=cfg)
    return create_category(root, new_path, carried, children, hook=hook, config=cfg)


def create_tree(
    entries: Iterable[Entry], *, config: TreeConfig | None = None
) -> Category:
    """Build a new tree from flat ``(path, properties)`` entries.

    Entries may come in any order; missing ancestors are created with empty
    properties and filled in when their own entry is reached.  No hook is
    called.

    Returns:
        The root of the new tree.
    """
    builder = TreeBuilder(config if config is not None else TreeConfig())
    return builder.build(entries)


def _rebase(
    children: tuple[Category, ...], old: str, new: str
) -> tuple[Category, ...]:
    """Rewrite the ``old`` path prefix of every descendant to ``new``."""
    rebased = []
    for child in children:
        path = child.path
        if path.startswith(old):
            path = new + path[len(old) :]
        rebased.append(
            replace(child, path=path, children=_rebase(child.children, old, new))
        )
    return tuple(rebased)
