"""Breadth-first path search (shortest by step count)."""

from __future__ import annotations

from collections import deque
from typing import AbstractSet

from gridpath.search.finder import neighbors
from gridpath.search.position import Position


class BreadthFirstPathFinder:
    def find_path(
        self,
        width: int,
        height: int,
        start: Position,
        goal: Position,
        blocked: AbstractSet[Position] | None = None,
    ) -> list[Position] | None:
        blocked = frozenset(blocked or ())
        queue: deque[Position] = deque([start])
        came_from: dict[Position, Position | None] = {start: None}

        while queue:
            current = queue.popleft()
            if current == goal:
                break
            for neighbor in neighbors(current, width, height):
                if neighbor in came_from or neighbor in blocked:
                    continue
                came_from[neighbor] = current
                queue.append(neighbor)

        if goal not in came_from:
            return None

        path: list[Position] = []
        current: Position | None = goal
        while current is not None:
            path.append(current)
            current = came_from[current]
        path.reverse()
        return path
