"""Tests for TreeConfig frozen dataclass and MatchMode StrEnum.

Covers:
- Default values (match_mode=PATH, separator="/", root_path="/")
- Immutability (FrozenInstanceError on assignment)
- Validation: separator must be a single character
- Validation: root_path must not be empty
- MatchMode has exactly two values: path, segment
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from category_tree.algorithm.config import MatchMode, TreeConfig

# ---------------------------------------------------------------------------
# MatchMode
# ---------------------------------------------------------------------------


class TestMatchMode:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(MatchMode)) == 2

    def test_values(self) -> None:
        assert MatchMode.PATH == "path"
        assert MatchMode.SEGMENT == "segment"

    def test_is_str_subclass(self) -> None:
        assert isinstance(MatchMode.PATH, str)

    def test_lookup_by_value(self) -> None:
        assert MatchMode("segment") is MatchMode.SEGMENT


# ---------------------------------------------------------------------------
# TreeConfig — default construction
# ---------------------------------------------------------------------------


class TestTreeConfigDefaults:
    def test_defaults(self) -> None:
        config = TreeConfig()
        assert config.match_mode is MatchMode.PATH
        assert config.separator == "/"
        assert config.root_path == "/"

    def test_custom_values(self) -> None:
        config = TreeConfig(match_mode=MatchMode.SEGMENT, separator=".", root_path="*")
        assert config.match_mode is MatchMode.SEGMENT
        assert config.separator == "."
        assert config.root_path == "*"

    def test_equality(self) -> None:
        assert TreeConfig() == TreeConfig()

    def test_is_hashable(self) -> None:
        assert hash(TreeConfig()) == hash(TreeConfig())


# ---------------------------------------------------------------------------
# TreeConfig — immutability
# ---------------------------------------------------------------------------


class TestTreeConfigFrozen:
    def test_cannot_assign_separator(self) -> None:
        config = TreeConfig()
        with pytest.raises(FrozenInstanceError):
            config.separator = "."  # type: ignore[misc]

    def test_cannot_assign_match_mode(self) -> None:
        config = TreeConfig()
        with pytest.raises(FrozenInstanceError):
            config.match_mode = MatchMode.SEGMENT  # type: ignore[misc]


# ---------------------------------------------------------------------------
# TreeConfig — validation
# ---------------------------------------------------------------------------


class TestTreeConfigValidation:
    @pytest.mark.parametrize("separator", ["", "//", "::"])
    def test_separator_must_be_single_character(self, separator: str) -> None:
        with pytest.raises(ValueError, match="separator"):
            TreeConfig(separator=separator)

    def test_root_path_must_not_be_empty(self) -> None:
        with pytest.raises(ValueError, match="root_path"):
            TreeConfig(root_path="")
