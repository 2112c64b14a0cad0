"""Finder selection and search runs."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable

from gridpath.search.astar import AStarPathFinder
from gridpath.search.breadth_first import BreadthFirstPathFinder
from gridpath.search.contracts import SearchRequest
from gridpath.search.depth_first import DepthFirstPathFinder
from gridpath.search.finder import PathFinder
from gridpath.search.position import Position

logger = logging.getLogger(__name__)

DEFAULT_FINDER = "astar"

FINDERS: dict[str, Callable[[], PathFinder]] = {
    "astar": AStarPathFinder,
    "bfs": BreadthFirstPathFinder,
    "dfs": DepthFirstPathFinder,
}


@dataclass(frozen=True)
class SearchReport:
    request: SearchRequest
    finder_name: str
    path: list[Position] | None
    elapsed_ms: float
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path is not None


def resolve_finder_name(finder_name: str | None = None) -> str:
    name = finder_name or os.getenv("GRIDPATH_FINDER") or DEFAULT_FINDER
    if name not in FINDERS:
        known = ", ".join(sorted(FINDERS))
        raise ValueError(f"Unknown finder {name!r}. Expected one of: {known}.")
    return name


def resolve_finder(finder_name: str | None = None) -> PathFinder:
    return _build_finder(resolve_finder_name(finder_name))


def run_search(
    request: SearchRequest, *, finder_name: str | None = None
) -> SearchReport:
    name = resolve_finder_name(finder_name)
    finder = _build_finder(name)

    started = time.perf_counter()
    path, stats = _solve(finder, request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        "%s search %s -> %s: %s in %.2f ms",
        name,
        request.start,
        request.goal,
        f"{len(path)} cells" if path is not None else "no path",
        elapsed_ms,
    )
    return SearchReport(
        request=request,
        finder_name=name,
        path=path,
        elapsed_ms=elapsed_ms,
        stats=stats,
    )


def _build_finder(name: str) -> PathFinder:
    return FINDERS[name]()


def _solve(
    finder: PathFinder, request: SearchRequest
) -> tuple[list[Position] | None, dict[str, int]]:
    if isinstance(finder, AStarPathFinder):
        result = finder.search(
            request.width, request.height, request.start, request.goal, request.blocked
        )
        return result.path, result.stats()
    return request.solve_with(finder), {}
