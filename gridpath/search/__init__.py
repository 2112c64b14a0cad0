"""Path finders for 4-connected grids."""

from gridpath.search.astar import AStarPathFinder, SearchNode, SearchResult
from gridpath.search.breadth_first import BreadthFirstPathFinder
from gridpath.search.checks import is_valid_path, path_problems
from gridpath.search.contracts import SearchRequest
from gridpath.search.depth_first import DepthFirstPathFinder
from gridpath.search.finder import PathFinder, neighbors
from gridpath.search.heuristics import Heuristic, manhattan_distance, zero_distance
from gridpath.search.position import Position

__all__ = [
    "AStarPathFinder",
    "BreadthFirstPathFinder",
    "DepthFirstPathFinder",
    "Heuristic",
    "PathFinder",
    "Position",
    "SearchNode",
    "SearchRequest",
    "SearchResult",
    "is_valid_path",
    "manhattan_distance",
    "neighbors",
    "path_problems",
    "zero_distance",
]
