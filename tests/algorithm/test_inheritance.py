"""Tests for sticky/exclude property inheritance.

Covers:
- sticky_merge for each combination of flags
- stickify marks every property sticky without mutating the input
- Root properties always propagate, sticky or not
- Non-sticky properties below the root never propagate
- Closer ancestors override farther ones
- Excluded properties stop propagation for the node and its descendants
- A descendant can re-enable a property excluded above it
- effective_properties merges local values over inherited ones
"""

from __future__ import annotations

import pytest

from category_tree.algorithm.inheritance import (
    PropertyMerger,
    collect_properties,
    effective_properties,
    merge_chain,
    stickify,
    sticky_merge,
)
from category_tree.algorithm.resolver import PathResolver
from category_tree.tree.builder import TreeBuilder
from category_tree.tree.cursor import Cursor
from category_tree.tree.nodes import Category, Property

STICKY = {"sticky": True}


def _cursor(entries: list[tuple[str, dict[str, object]]], path: str) -> Cursor:
    root = TreeBuilder().build(entries)
    cursor = PathResolver().resolve(Cursor.from_root(root), path)
    assert cursor is not None
    return cursor


def _sticky(value: object) -> dict[str, object]:
    return {"value": value, **STICKY}


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


class TestStickyMerge:
    def test_non_sticky_is_ignored(self) -> None:
        acc = {"a": 1}
        assert sticky_merge(acc, "a", Property(2)) == {"a": 1}

    def test_sticky_sets_value(self) -> None:
        assert sticky_merge({}, "a", Property(2, sticky=True)) == {"a": 2}

    def test_sticky_overwrites_value(self) -> None:
        assert sticky_merge({"a": 1}, "a", Property(2, sticky=True)) == {"a": 2}

    def test_sticky_excluded_removes_key(self) -> None:
        prop = Property(None, sticky=True, excluded=True)
        assert sticky_merge({"a": 1, "b": 2}, "a", prop) == {"b": 2}

    def test_sticky_excluded_on_missing_key(self) -> None:
        prop = Property(None, sticky=True, excluded=True)
        assert sticky_merge({}, "a", prop) == {}

    def test_excluded_without_sticky_is_ignored(self) -> None:
        assert sticky_merge({"a": 1}, "a", Property(excluded=True)) == {"a": 1}


class TestStickify:
    def test_marks_every_property(self) -> None:
        props = {"a": Property(1), "b": Property(2, sticky=True)}
        result = stickify(props)
        assert all(prop.sticky for prop in result.values())
        assert result["a"].value == 1

    def test_does_not_mutate_input(self) -> None:
        props = {"a": Property(1)}
        stickify(props)
        assert props["a"].sticky is False


class TestMergeChain:
    def test_empty_chain(self) -> None:
        assert merge_chain([]) == {}

    def test_root_only(self) -> None:
        assert merge_chain([{"a": Property(1)}]) == {"a": 1}

    def test_non_sticky_below_root_ignored(self) -> None:
        chain = [{}, {"a": Property(1)}]
        assert merge_chain(chain) == {}


# ---------------------------------------------------------------------------
# Inheritance through the tree
# ---------------------------------------------------------------------------


class TestCollectProperties:
    def test_root_properties_always_propagate(self) -> None:
        cursor = _cursor([("/", {"currency": "EUR"}), ("a/b", {})], "a/b")
        assert collect_properties(cursor) == {"currency": "EUR"}

    def test_root_inherits_its_own_properties(self) -> None:
        cursor = _cursor([("/", {"currency": "EUR"})], "/")
        assert collect_properties(cursor) == {"currency": "EUR"}

    def test_closer_ancestor_wins(self) -> None:
        entries = [
            ("/", {"color": _sticky("red")}),
            ("a", {"color": _sticky("blue")}),
            ("a/b", {}),
        ]
        assert collect_properties(_cursor(entries, "a/b")) == {"color": "blue"}

    def test_non_sticky_does_not_propagate(self) -> None:
        entries = [("a", {"size": "L"}), ("a/b", {})]
        assert collect_properties(_cursor(entries, "a/b")) == {}

    def test_non_sticky_not_in_own_inherited_set(self) -> None:
        cursor = _cursor([("a", {"size": "L"})], "a")
        assert collect_properties(cursor) == {}

    def test_own_sticky_is_included(self) -> None:
        cursor = _cursor([("a", {"size": _sticky("L")})], "a")
        assert collect_properties(cursor) == {"size": "L"}

    def test_exclusion(self) -> None:
        entries = [
            ("/", {"region": _sticky("EU")}),
            ("a", {"region": {"sticky": True, "excluded": True}}),
        ]
        assert collect_properties(_cursor(entries, "a")) == {}

    def test_exclusion_applies_to_descendants(self) -> None:
        entries = [
            ("/", {"region": _sticky("EU"), "vat": _sticky(True)}),
            ("a", {"region": {"sticky": True, "excluded": True}}),
            ("a/b/c", {}),
        ]
        assert collect_properties(_cursor(entries, "a/b/c")) == {"vat": True}

    def test_exclusion_does_not_affect_siblings(self) -> None:
        entries = [
            ("/", {"region": _sticky("EU")}),
            ("a", {"region": {"sticky": True, "excluded": True}}),
            ("b", {}),
        ]
        assert collect_properties(_cursor(entries, "b")) == {"region": "EU"}

    def test_descendant_can_reenable(self) -> None:
        entries = [
            ("/", {"region": _sticky("EU")}),
            ("a", {"region": {"sticky": True, "excluded": True}}),
            ("a/b", {"region": _sticky("UK")}),
            ("a/b/c", {}),
        ]
        assert collect_properties(_cursor(entries, "a/b/c")) == {"region": "UK"}

    def test_values_are_opaque(self) -> None:
        value = {"type": "bool", "default": False}
        entries = [("a", {"xenon": {**value, "sticky": True}}), ("a/b", {})]
        cursor = _cursor(entries, "a/b")
        assert collect_properties(cursor) == {"xenon": value}

    def test_sticky_flag_not_in_result(self) -> None:
        cursor = _cursor([("a", {"xenon": {"type": "bool", "sticky": True}})], "a")
        result = collect_properties(cursor)
        assert "sticky" not in result["xenon"]


class TestPropertyMerger:
    def test_collect_matches_function(self) -> None:
        cursor = _cursor([("/", {"a": 1}), ("x", {"b": _sticky(2)})], "x")
        assert PropertyMerger().collect(cursor) == collect_properties(cursor)

    def test_effective_includes_local_non_sticky(self) -> None:
        cursor = _cursor([("/", {"a": 1}), ("x", {"b": 2})], "x")
        assert PropertyMerger().effective(cursor) == {"a": 1, "b": 2}


class TestEffectiveProperties:
    def test_local_overrides_inherited(self) -> None:
        result = effective_properties({"a": 1}, {"a": Property(2)})
        assert result == {"a": 2}

    def test_local_excluded_removes(self) -> None:
        prop = Property(None, sticky=True, excluded=True)
        assert effective_properties({"a": 1, "b": 2}, {"a": prop}) == {"b": 2}

    @pytest.mark.parametrize("sticky", [True, False])
    def test_local_applies_regardless_of_sticky(self, sticky: bool) -> None:
        result = effective_properties({}, {"a": Property(1, sticky=sticky)})
        assert result == {"a": 1}

    def test_inputs_not_mutated(self) -> None:
        inherited = {"a": 1}
        effective_properties(inherited, {"a": Property(2)})
        assert inherited == {"a": 1}


class TestDirectTrees:
    def test_hand_built_tree(self) -> None:
        """Inheritance works on trees not produced by TreeBuilder."""
        root = Category(
            "/",
            {"root_only": Property("r")},
            (Category("/a", {"s": Property(1, sticky=True)}, (Category("/a/b"),)),),
        )
        cursor = PathResolver().resolve(Cursor.from_root(root), "a/b")
        assert cursor is not None
        assert collect_properties(cursor) == {"root_only": "r", "s": 1}
