"""pytest plugin for category-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from category_tree import Category, CategoryTree, TreeConfig, lookup


@pytest.fixture(scope="session")
def assert_inherits() -> Any:
    """Fixture that returns a callable inherited-properties asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to lookup(), which never mutates the tree it is given).

    Usage in tests::

        def test_region(assert_inherits):
            root = create_tree([("eu", {"region": {"value": "EU", "sticky": True}})])
            assert_inherits(root, "eu/de", {"region": "EU"})

        def test_missing(assert_inherits):
            with pytest.raises(AssertionError, match=r"not found"):
                assert_inherits(root, "nowhere", {})

    Args:
        No arguments -- the fixture is injected by pytest.

    Returns:
        A callable ``_assert(tree, path, expected, config=None) -> None`` that
        raises ``AssertionError`` when ``path`` is missing or its inherited
        properties differ from ``expected``.
    """

    def _assert(
        tree: Category | CategoryTree,
        path: str,
        expected: Mapping[str, Any],
        config: TreeConfig | None = None,
    ) -> None:
        """Assert that the category at ``path`` inherits exactly ``expected``.

        Args:
            tree:     A root Category or a CategoryTree handle.
            path:     Path of the category to check.
            expected: Expected inherited property values.
            config:   Optional TreeConfig, used when ``tree`` is a Category.

        Raises:
            AssertionError: When the category does not exist, or its
                inherited mapping is not equal to ``expected``, with a message
                including the path, expected and actual mappings.
        """
        if isinstance(tree, CategoryTree):
            result = tree.lookup(path)
        else:
            result = lookup(tree, path, config=config)

        if result is None:
            raise AssertionError(f"category {path!r} not found")
        if result.inherited != dict(expected):
            raise AssertionError(
                f"inherited properties differ for {result.path!r}\n"
                f"  expected: {dict(expected)}\n"
                f"  actual:   {result.inherited}\n"
                f"  local:    {dict(result.local)}"
            )

    return _assert
