"""PersistenceHook Protocol for category-tree storage extension point.

Defines the structural interface every persistence hook must satisfy.
Users can plug in custom storage without inheriting from any base class —
any class with conformant ``store`` and ``delete`` methods passes
``isinstance`` checks.

Hooks are injected into the operations that need them; nothing in the
package discovers them by inspecting category types.

Example::

    from category_tree.protocols import PersistenceHook

    class SqlHook:
        def store(self, category: Category) -> None:
            db.upsert(category.path, category.properties)

        def delete(self, category: Category) -> None:
            db.delete_prefix(category.path)

    assert isinstance(SqlHook(), PersistenceHook)  # True — structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from category_tree.tree.nodes import Category


@runtime_checkable
class PersistenceHook(Protocol):
    """Structural protocol for persistence hooks.

    Both methods are called synchronously and at most once per operation:
    - ``store`` receives the finalized node after ``create_category``.
    - ``delete`` receives the root of the subtree being removed, before it
      is detached from the tree.

    Errors raised by a hook are not caught; they propagate to the caller of
    the operation, and the tree is left as it was before that operation.
    """

    def store(self, category: Category) -> None: ...

    def delete(self, category: Category) -> None: ...
