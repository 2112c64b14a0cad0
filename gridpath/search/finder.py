"""Path finder interface shared by all search strategies."""

from __future__ import annotations

from typing import AbstractSet, Protocol

from gridpath.search.position import Position


class PathFinder(Protocol):
    def find_path(
        self,
        width: int,
        height: int,
        start: Position,
        goal: Position,
        blocked: AbstractSet[Position] | None = None,
    ) -> list[Position] | None:
        """Return the cells from ``start`` to ``goal``, or None if unreachable."""


def neighbors(position: Position, width: int, height: int) -> list[Position]:
    """In-bounds 4-neighbours in west, south, east, north order."""
    x, y = position.x, position.y
    candidates: list[Position] = []
    if x > 0:
        candidates.append(Position(x - 1, y))
    if y < height - 1:
        candidates.append(Position(x, y + 1))
    if x < width - 1:
        candidates.append(Position(x + 1, y))
    if y > 0:
        candidates.append(Position(x, y - 1))
    return candidates
