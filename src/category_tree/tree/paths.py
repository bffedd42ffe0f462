"""Path helpers: split slash-delimited category paths and build identities.

Handles the equivalent spellings of a path:
- leading separator ("/a/b" -> ["a", "b"])
- trailing separator ("a/b/" -> ["a", "b"])
- repeated separators ("a//b" -> ["a", "b"])
- the empty path and the root ("" and "/" -> [])
"""

from __future__ import annotations

__all__ = ["canonical_path", "child_path", "last_segment", "split_path"]


def split_path(path: str | None, separator: str = "/") -> list[str]:
    """Split a path into its non-empty segments.

    Args:
        path:      The raw path. None is treated as the empty path.
        separator: Segment separator. Defaults to "/".

    Returns:
        Segments in root-to-leaf order. Empty for the root and the empty path.
    """
    if not path:
        return []
    return [segment for segment in path.split(separator) if segment]


def canonical_path(path: str | None, separator: str = "/") -> str:
    """Return the canonical absolute spelling of ``path`` ("a/b/" -> "/a/b")."""
    return separator + separator.join(split_path(path, separator))


def child_path(parent: str, segment: str, separator: str = "/") -> str:
    """Return the cumulative path of ``segment`` under ``parent``.

    The root ("/") contributes no prefix, so ``child_path("/", "a") == "/a"``.
    """
    prefix = parent.rstrip(separator)
    return f"{prefix}{separator}{segment}"


def last_segment(path: str, separator: str = "/") -> str:
    """Return the final segment of ``path``, or "" for the root."""
    segments = split_path(path, separator)
    return segments[-1] if segments else ""
