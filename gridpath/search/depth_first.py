"""Exhaustive depth-first path search."""

from __future__ import annotations

from typing import AbstractSet, Iterator

from gridpath.search.finder import neighbors
from gridpath.search.position import Position


class DepthFirstPathFinder:
    """Return the first path found by an unguided depth-first walk.

    Neighbours are tried west, south, east, north. Cells are never revisited,
    so the result is a valid path but not necessarily a shortest one.
    """

    def find_path(
        self,
        width: int,
        height: int,
        start: Position,
        goal: Position,
        blocked: AbstractSet[Position] | None = None,
    ) -> list[Position] | None:
        if start == goal:
            return [start]

        blocked = frozenset(blocked or ())
        visited: set[Position] = {start}
        path: list[Position] = [start]
        stack: list[Iterator[Position]] = [iter(neighbors(start, width, height))]

        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                path.pop()
                continue
            if step in visited or step in blocked:
                continue
            path.append(step)
            if step == goal:
                return path
            visited.add(step)
            stack.append(iter(neighbors(step, width, height)))

        return None
