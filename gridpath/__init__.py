"""Shortest paths on grids with blocked cells."""

from gridpath.app import SearchReport, resolve_finder, run_search
from gridpath.search import (
    AStarPathFinder,
    BreadthFirstPathFinder,
    DepthFirstPathFinder,
    PathFinder,
    Position,
    SearchRequest,
    SearchResult,
)

__all__ = [
    "AStarPathFinder",
    "BreadthFirstPathFinder",
    "DepthFirstPathFinder",
    "PathFinder",
    "Position",
    "SearchReport",
    "SearchRequest",
    "SearchResult",
    "resolve_finder",
    "run_search",
]
