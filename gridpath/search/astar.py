"""Grid pathfinding (A*)."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import AbstractSet

from gridpath.search.finder import neighbors
from gridpath.search.heuristics import Heuristic, manhattan_distance
from gridpath.search.position import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    position: Position
    parent: int | None
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass(frozen=True)
class SearchResult:
    path: list[Position] | None
    expanded: int = 0
    reopened: int = 0
    relaxed: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None

    def stats(self) -> dict[str, int]:
        return {
            "expanded": self.expanded,
            "reopened": self.reopened,
            "relaxed": self.relaxed,
        }


class AStarPathFinder:
    """A* over a 4-connected grid with unit step cost.

    Frontier ties on ``f`` go to the smaller ``h``, then to the node that
    entered the frontier first, so the returned path is deterministic for
    fixed inputs. The start cell is never checked against ``blocked``.
    """

    def __init__(self, heuristic: Heuristic = manhattan_distance) -> None:
        self._heuristic = heuristic

    def find_path(
        self,
        width: int,
        height: int,
        start: Position,
        goal: Position,
        blocked: AbstractSet[Position] | None = None,
    ) -> list[Position] | None:
        return self.search(width, height, start, goal, blocked).path

    def search(
        self,
        width: int,
        height: int,
        start: Position,
        goal: Position,
        blocked: AbstractSet[Position] | None = None,
    ) -> SearchResult:
        run = _SearchRun(
            width,
            height,
            goal,
            frozenset(blocked or ()),
            self._heuristic,
        )
        path = run.run(start)
        result = SearchResult(
            path=path,
            expanded=run.expanded,
            reopened=run.reopened,
            relaxed=run.relaxed,
        )
        logger.debug(
            "A* %s -> %s on %dx%d: %s (expanded=%d reopened=%d relaxed=%d)",
            start,
            goal,
            width,
            height,
            f"{len(path)} cells" if path is not None else "no path",
            result.expanded,
            result.reopened,
            result.relaxed,
        )
        return result


class _SearchRun:
    """State for a single search call.

    Nodes live in ``_nodes`` and refer to their parent by index. The open
    and closed tables map a cell to the index of its current node; a cell is
    in at most one of them. The heap may hold stale entries for cells whose
    open node was since replaced or finalized; those are skipped on pop.
    """

    def __init__(
        self,
        width: int,
        height: int,
        goal: Position,
        blocked: frozenset[Position],
        heuristic: Heuristic,
    ) -> None:
        self._width = width
        self._height = height
        self._goal = goal
        self._blocked = blocked
        self._heuristic = heuristic
        self._nodes: list[SearchNode] = []
        self._open: dict[Position, int] = {}
        self._closed: dict[Position, int] = {}
        self._heap: list[tuple[int, int, int]] = []
        self.expanded = 0
        self.reopened = 0
        self.relaxed = 0

    def run(self, start: Position) -> list[Position] | None:
        self._push(start, None, 0, self._heuristic(start, self._goal))

        while self._goal not in self._closed and self._open:
            index = self._pop()
            node = self._nodes[index]
            self._closed[node.position] = index
            self.expanded += 1

            for neighbor in neighbors(node.position, self._width, self._height):
                if neighbor in self._blocked:
                    continue
                self._relax(neighbor, index, node.g + 1)

        goal_index = self._closed.get(self._goal)
        if goal_index is None:
            return None
        return self._reconstruct(goal_index)

    def _relax(self, position: Position, parent: int, g: int) -> None:
        h = self._heuristic(position, self._goal)
        f = g + h

        closed_index = self._closed.get(position)
        if closed_index is not None:
            if self._nodes[closed_index].f <= f:
                return
            del self._closed[position]
            self.reopened += 1
        else:
            open_index = self._open.get(position)
            if open_index is not None:
                if self._nodes[open_index].f <= f:
                    return
                self.relaxed += 1

        self._push(position, parent, g, h)

    def _push(self, position: Position, parent: int | None, g: int, h: int) -> None:
        index = len(self._nodes)
        self._nodes.append(SearchNode(position=position, parent=parent, g=g, h=h))
        self._open[position] = index
        # Pool indices grow monotonically, so they double as insertion order.
        heapq.heappush(self._heap, (g + h, h, index))

    def _pop(self) -> int:
        while True:
            _, _, index = heapq.heappop(self._heap)
            position = self._nodes[index].position
            if self._open.get(position) == index:
                del self._open[position]
                return index

    def _reconstruct(self, index: int) -> list[Position]:
        path: list[Position] = []
        current: int | None = index
        while current is not None:
            node = self._nodes[current]
            path.append(node.position)
            current = node.parent
        path.reverse()
        return path
