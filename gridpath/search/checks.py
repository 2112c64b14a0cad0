"""Validity checks for paths returned by a finder."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from gridpath.search.heuristics import manhattan_distance
from gridpath.search.position import Position


def path_problems(
    width: int,
    height: int,
    start: Position,
    goal: Position,
    blocked: AbstractSet[Position] | None,
    path: Sequence[Position],
) -> list[str]:
    """Describe every way ``path`` fails to be a walkable start-to-goal route.

    An empty list means the path is valid. The start cell is exempt from the
    obstacle check.
    """
    if not path:
        return ["path is empty"]

    blocked = blocked or frozenset()
    problems: list[str] = []
    if path[0] != start:
        problems.append(f"path starts at {path[0]}, expected {start}")
    if path[-1] != goal:
        problems.append(f"path ends at {path[-1]}, expected {goal}")

    for index, position in enumerate(path):
        if not (0 <= position.x < width and 0 <= position.y < height):
            problems.append(f"step {index} at {position} is outside the grid")
        if index > 0 and position in blocked:
            problems.append(f"step {index} at {position} is blocked")
        if index > 0 and manhattan_distance(path[index - 1], position) != 1:
            problems.append(
                f"step {index} jumps from {path[index - 1]} to {position}"
            )
    return problems


def is_valid_path(
    width: int,
    height: int,
    start: Position,
    goal: Position,
    blocked: AbstractSet[Position] | None,
    path: Sequence[Position],
) -> bool:
    return not path_problems(width, height, start, goal, blocked, path)
