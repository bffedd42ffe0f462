"""PathResolver: walks (and optionally creates) the nodes addressed by a path.

Resolution is strictly left to right with no backtracking. For each segment
the direct children of the current node are scanned with ``down``/``right``
for one whose identity matches; the cursor descends into it. A missing child
is appended as the rightmost child with empty properties when ``create`` is
True; otherwise the whole resolution fails and None is returned.

Identities depend on ``TreeConfig.match_mode``:
- PATH (default): the cumulative path, built from the focused node's own path
  ("/a" + "b" -> "/a/b"), so resolution is relative to the starting cursor.
- SEGMENT: the bare segment ("b").
"""

from __future__ import annotations

from dataclasses import dataclass, field

from category_tree.algorithm.config import MatchMode, TreeConfig
from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Category
from category_tree.tree.paths import canonical_path, child_path, split_path

__all__ = ["PathResolver"]


@dataclass
class PathResolver:
    """Locates the node addressed by a slash-delimited path.

    Example::

        resolver = PathResolver()
        cursor = resolver.resolve(Cursor.from_root(root), "a/b", create=True)
        cursor.node.path   # "/a/b"
    """

    config: TreeConfig = field(default_factory=TreeConfig)

    def resolve(
        self, cursor: Cursor, path: str | None, create: bool = False
    ) -> Cursor | None:
        """Return a cursor focused on the node at ``path``.

        Args:
            cursor: Where resolution starts; normally the root.
            path:   Slash-delimited path. Empty segments are ignored, so
                    "/a/b", "a/b" and "a/b/" are equivalent; the empty path
                    resolves to ``cursor`` itself.
            create: When True, missing segments are created as empty nodes.

        Returns:
            A cursor on the target node, or None when a segment is missing
            and ``create`` is False.  The input cursor is returned unchanged
            when ``path`` names the focused node.
        """
        if self.names_focus(cursor.node.path, path):
            return cursor

        node = cursor
        for segment in split_path(path, self.config.separator):
            identity = self._identity(node.node.path, segment)
            child = self._find_child(node, identity)
            if child is None:
                if not create:
                    return None
                child = node.append_child(Category(identity))
            node = child
        return node

    def identity_for(self, base: str, path: str | None) -> str:
        """Return the identity ``path`` would get when resolved from ``base``."""
        identity = base
        for segment in split_path(path, self.config.separator):
            identity = self._identity(identity, segment)
        return identity

    def names_focus(self, focus: str, path: str | None) -> bool:
        """True when resolving ``path`` from ``focus`` stays on ``focus``."""
        if path == focus or not split_path(path, self.config.separator):
            return True
        if self.config.match_mode is MatchMode.PATH:
            return canonical_path(path, self.config.separator) == focus
        return False

    def _identity(self, parent_path: str, segment: str) -> str:
        if self.config.match_mode is MatchMode.SEGMENT:
            return segment
        return child_path(parent_path, segment, self.config.separator)

    @staticmethod
    def _find_child(cursor: Cursor, identity: str) -> Cursor | None:
        for child in cursor.children():
            if child.node.path == identity:
                return child
        return None
