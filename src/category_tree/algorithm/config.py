"""TreeConfig and MatchMode for path resolution configuration.

TreeConfig is a frozen (immutable) dataclass holding the resolution
parameters.  MatchMode selects how a path segment is matched against the
children of a node: by cumulative path from the root, or by bare segment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class MatchMode(StrEnum):
    """How a child node is identified during path resolution.

    - PATH:    A node's identity is its full path from the root ("/a/b").
               Sibling subtrees sharing a segment name never collide.
    - SEGMENT: A node's identity is its bare segment label ("b").
    """

    PATH = auto()
    SEGMENT = auto()


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for path resolution.

    Attributes:
        match_mode: How children are matched against path segments.
        separator:  Single character separating path segments.  Default "/".
        root_path:  Identity given to the root node of new trees.  Default "/".
    """

    match_mode: MatchMode = MatchMode.PATH
    separator: str = "/"
    root_path: str = "/"

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            msg = f"separator must be a single character, got {self.separator!r}"
            raise ValueError(msg)
        if not self.root_path:
            msg = "root_path must not be empty"
            raise ValueError(msg)
