"""Tests for InMemoryHook.

Covers storing, overwriting, subtree deletion, call recording and counting.
"""

from __future__ import annotations

import pytest

from category_tree.hooks import InMemoryHook
from category_tree.tree.nodes import Category, Property


@pytest.fixture
def hook() -> InMemoryHook:
    return InMemoryHook()


class TestStore:
    def test_store_keeps_category_by_path(self, hook: InMemoryHook) -> None:
        node = Category("/a", {"x": Property(1)})
        hook.store(node)
        assert hook.stored == {"/a": node}

    def test_store_replaces_previous_version(self, hook: InMemoryHook) -> None:
        hook.store(Category("/a", {"x": Property(1)}))
        newer = Category("/a", {"x": Property(2)})
        hook.store(newer)
        assert hook.stored["/a"] is newer
        assert hook.count("store") == 2


class TestDelete:
    def test_delete_drops_subtree(self, hook: InMemoryHook) -> None:
        leaf = Category("/a/b")
        parent = Category("/a", children=(leaf,))
        hook.store(parent)
        hook.store(leaf)
        hook.store(Category("/c"))
        hook.delete(parent)
        assert set(hook.stored) == {"/c"}

    def test_delete_unknown_is_recorded(self, hook: InMemoryHook) -> None:
        hook.delete(Category("/ghost"))
        assert hook.calls == [("delete", "/ghost")]
        assert hook.stored == {}


class TestCalls:
    def test_calls_in_order(self, hook: InMemoryHook) -> None:
        hook.store(Category("/a"))
        hook.delete(Category("/a"))
        hook.store(Category("/b"))
        assert hook.calls == [("store", "/a"), ("delete", "/a"), ("store", "/b")]
        assert hook.count("store") == 2
        assert hook.count("delete") == 1

    def test_instances_are_isolated(self) -> None:
        first = InMemoryHook()
        second = InMemoryHook()
        first.store(Category("/a"))
        assert second.calls == []
        assert second.stored == {}
