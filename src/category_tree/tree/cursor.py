"""Cursor: a navigable, editable location inside an immutable category tree.

A cursor is the focused node plus the path of child indices leading to it from
the root. Each step of that path is a frame recording the parent node as it
was seen on the way down and the index of the focus among its children.

Edits never mutate shared structure. ``edit``/``replace`` swap the focused node
and mark the cursor as changed; moving ``up`` (or sideways) splices a changed
node back into its parent at the recorded index, so the spine from the focus
to the root is rebuilt lazily, one level per move. ``root()`` walks all the way
up and returns the rebuilt root node.

Moves that have nowhere to go (``down`` on a leaf, ``right`` on the last
child, ``up`` on the root) return None.

Example::

    cursor = Cursor.from_root(Category("/"))
    cursor = cursor.append_child(Category("/a"))   # focus: /a
    cursor = cursor.edit(Category.with_properties, {"x": 1})
    root = cursor.root()                             # "/" with edited "/a"
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from category_tree.tree.nodes import Category

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class _Frame:
    """One step of the index path from the root to the focus.

    Attributes:
        parent:  The parent node as last seen from below.
        index:   Position of the focus within ``parent.children``.
        changed: True when ``parent`` differs from the node held by its own
                 parent, i.e. it must be spliced back when moving further up.
    """

    parent: Category
    index: int
    changed: bool = False


def _splice(
    children: tuple[Category, ...], index: int, node: Category
) -> tuple[Category, ...]:
    return (*children[:index], node, *children[index + 1 :])


@dataclass(frozen=True, slots=True)
class Cursor:
    """A location in a category tree.

    Attributes:
        node:    The focused Category (frozen, so read-only).
        frames:  Index path from the root to the focus, root first.
        changed: True when ``node`` was edited and not yet spliced into its parent.
    """

    node: Category
    frames: tuple[_Frame, ...] = field(default=(), repr=False)
    changed: bool = False

    @classmethod
    def from_root(cls, root: Category) -> Cursor:
        """Return a cursor focused on ``root``."""
        return cls(root)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        """True when the cursor is focused on the root of its tree."""
        return not self.frames

    @property
    def depth(self) -> int:
        """Number of edges between the root and the focus."""
        return len(self.frames)

    @property
    def indices(self) -> tuple[int, ...]:
        """Child indices leading from the root to the focus."""
        return tuple(frame.index for frame in self.frames)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def down(self) -> Cursor | None:
        """Move to the first child, or None for a leaf."""
        if not self.node.children:
            return None
        frame = _Frame(self.node, 0, self.changed)
        return Cursor(self.node.children[0], (*self.frames, frame))

    def right(self) -> Cursor | None:
        """Move to the next sibling, or None for the rightmost node."""
        return self._sibling(1)

    def left(self) -> Cursor | None:
        """Move to the previous sibling, or None for the leftmost node."""
        return self._sibling(-1)

    def up(self) -> Cursor | None:
        """Move to the parent, rebuilding it when the focus changed.

        Returns None at the root.
        """
        if not self.frames:
            return None
        frame = self.frames[-1]
        parent = frame.parent
        if self.changed:
            parent = parent.with_children(
                _splice(parent.children, frame.index, self.node)
            )
        return Cursor(parent, self.frames[:-1], self.changed or frame.changed)

    def top(self) -> Cursor:
        """Move to the root, returning a cursor to keep navigating from there."""
        cursor = self
        while (parent := cursor.up()) is not None:
            cursor = parent
        return cursor

    def children(self) -> Iterator[Cursor]:
        """Yield a cursor for each child of the focus, left to right."""
        child = self.down()
        while child is not None:
            yield child
            child = child.right()

    def trail(self) -> list[Category]:
        """Return the focus followed by each of its ancestors up to the root.

        Ancestors are returned as recorded on the way down; their own
        properties are current, but their children may predate edits made
        below them.
        """
        return [self.node, *(frame.parent for frame in reversed(self.frames))]

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def replace(self, node: Category) -> Cursor:
        """Replace the focused node."""
        return Cursor(node, self.frames, changed=True)

    def edit(self, fn: Callable[..., Category], *args: Any, **kwargs: Any) -> Cursor:
        """Replace the focused node with ``fn(node, *args, **kwargs)``."""
        return self.replace(fn(self.node, *args, **kwargs))

    def append_child(self, category: Category) -> Cursor:
        """Insert ``category`` as the rightmost child and focus on it."""
        parent = self.node.with_children((*self.node.children, category))
        frame = _Frame(parent, len(parent.children) - 1, changed=True)
        return Cursor(category, (*self.frames, frame))

    def remove(self) -> Cursor:
        """Detach the focused node together with its subtree.

        Returns:
            A cursor on the left sibling of the removed node when there is
            one, otherwise on its parent.

        Raises:
            ValueError: When the focus is the root.
        """
        if not self.frames:
            msg = "cannot remove the root of a tree"
            raise ValueError(msg)

        frame = self.frames[-1]
        siblings = frame.parent.children
        remaining = (*siblings[: frame.index], *siblings[frame.index + 1 :])
        parent = frame.parent.with_children(remaining)

        if frame.index > 0:
            index = frame.index - 1
            return Cursor(
                remaining[index], (*self.frames[:-1], _Frame(parent, index, True))
            )
        return Cursor(parent, self.frames[:-1], changed=True)

    def root(self) -> Category:
        """Rebuild and return the root node with every edit applied."""
        return self.top().node

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _sibling(self, step: int) -> Cursor | None:
        if not self.frames:
            return None
        frame = self.frames[-1]
        index = frame.index + step
        if not 0 <= index < len(frame.parent.children):
            return None

        parent = frame.parent
        changed = frame.changed
        if self.changed:
            parent = parent.with_children(
                _splice(parent.children, frame.index, self.node)
            )
            changed = True
        frame = _Frame(parent, index, changed)
        return Cursor(parent.children[index], (*self.frames[:-1], frame))
