"""Distance estimates for guided search."""

from __future__ import annotations

from typing import Callable

from gridpath.search.position import Position

Heuristic = Callable[[Position, Position], int]


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def zero_distance(a: Position, b: Position) -> int:
    """Always 0; reduces A* to uniform-cost search."""
    return 0
