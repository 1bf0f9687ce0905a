"""Glob matching for project include patterns.

Semantics: case-sensitive, anchored to the whole path, matched per segment.
``*`` matches within one segment, ``**`` matches zero or more segments.
Wildcards never match a segment starting with ``.`` unless the pattern
segment itself starts with ``.``. Paths with a ``..`` segment never match.
Segments are compared with fnmatch, so ``*`` never crosses ``/``.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

PathPredicate: TypeAlias = "Callable[[str], bool]"

GLOBSTAR = "**"


def match(pattern: str) -> PathPredicate:
    """Create predicate testing a relative path against one glob pattern.

    Args:
        pattern: Glob pattern (e.g., "src/**/*.ts"). Leading "./" is ignored.

    Returns:
        Predicate returning True when the whole path matches.

    Raises:
        ValueError: If pattern is empty.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    pattern_parts = _collapse_globstars(_segments(pattern))

    def _predicate(candidate: str) -> bool:
        path_parts = _segments(candidate.replace("\\", "/"))
        if ".." in path_parts:
            return False
        return _match_segments(pattern_parts, path_parts)

    return _predicate


def match_any(patterns: Iterable[str], candidate: str) -> bool:
    """True on the first pattern matching candidate."""
    return any(match(p)(candidate) for p in patterns if p)


def _segments(value: str) -> tuple[str, ...]:
    """Split on "/", dropping empty and "." segments."""
    return tuple(part for part in value.split("/") if part not in ("", "."))


def _collapse_globstars(parts: tuple[str, ...]) -> tuple[str, ...]:
    collapsed: list[str] = []
    for part in parts:
        if part == GLOBSTAR and collapsed and collapsed[-1] == GLOBSTAR:
            continue
        collapsed.append(part)
    return tuple(collapsed)


def _match_segments(pattern: Sequence[str], path: Sequence[str]) -> bool:
    if not pattern:
        return not path

    head, rest = pattern[0], pattern[1:]

    if head == GLOBSTAR:
        # Consume zero or more segments, stopping at the first dot segment
        for consumed in range(len(path) + 1):
            if consumed and path[consumed - 1].startswith("."):
                return False
            if _match_segments(rest, path[consumed:]):
                return True
        return False

    if not path:
        return False

    segment = path[0]
    if segment.startswith(".") and not head.startswith("."):
        return False

    return fnmatch.fnmatchcase(segment, head) and _match_segments(rest, path[1:])
