import random

from gridpath.search.astar import AStarPathFinder, SearchNode
from gridpath.search.breadth_first import BreadthFirstPathFinder
from gridpath.search.checks import is_valid_path
from gridpath.search.heuristics import zero_distance
from gridpath.search.position import Position

ORIGIN = Position(0, 0)
CORNER = Position(4, 4)


def test_open_grid_corner_to_corner() -> None:
    path = AStarPathFinder().find_path(5, 5, ORIGIN, CORNER, None)
    assert path is not None
    assert len(path) == 9
    assert is_valid_path(5, 5, ORIGIN, CORNER, None, path)


def test_open_grid_reversed_endpoints() -> None:
    path = AStarPathFinder().find_path(5, 5, CORNER, ORIGIN, set())
    assert path is not None
    assert len(path) == 9
    assert path[0] == CORNER
    assert path[-1] == ORIGIN


def test_detour_keeps_shortest_length() -> None:
    blocked = {Position(2, 3), Position(2, 4), Position(4, 3)}
    path = AStarPathFinder().find_path(5, 5, ORIGIN, CORNER, blocked)
    assert path is not None
    assert len(path) == 9
    assert is_valid_path(5, 5, ORIGIN, CORNER, blocked, path)


def test_enclosed_goal_has_no_path() -> None:
    blocked = {Position(3, 3), Position(3, 4), Position(4, 3)}
    assert AStarPathFinder().find_path(5, 5, ORIGIN, CORNER, blocked) is None


def test_start_equals_goal() -> None:
    center = Position(2, 2)
    assert AStarPathFinder().find_path(5, 5, center, center) == [center]


def test_blocked_start_is_exempt() -> None:
    path = AStarPathFinder().find_path(3, 1, ORIGIN, Position(2, 0), {ORIGIN})
    assert path == [ORIGIN, Position(1, 0), Position(2, 0)]


def test_blocked_goal_is_unreachable() -> None:
    goal = Position(2, 2)
    assert AStarPathFinder().find_path(3, 3, ORIGIN, goal, {goal}) is None


def test_caller_obstacles_are_not_mutated() -> None:
    blocked = {Position(1, 1)}
    AStarPathFinder().find_path(3, 3, ORIGIN, Position(2, 2), blocked)
    assert blocked == {Position(1, 1)}


def test_ties_prefer_smaller_h_then_insertion_order() -> None:
    path = AStarPathFinder().find_path(3, 2, ORIGIN, Position(2, 1))
    assert path == [ORIGIN, Position(0, 1), Position(1, 1), Position(2, 1)]


def test_repeated_calls_are_independent() -> None:
    finder = AStarPathFinder()
    wall = {Position(1, 0), Position(1, 1)}
    pocket = {Position(1, 2), Position(2, 1)}

    first = finder.find_path(3, 3, ORIGIN, Position(2, 0), wall)
    enclosed = finder.find_path(3, 3, ORIGIN, Position(2, 2), pocket)
    second = finder.find_path(3, 3, ORIGIN, Position(2, 0), wall)

    assert first == second
    assert enclosed is None


def test_search_reports_statistics() -> None:
    result = AStarPathFinder().search(5, 5, ORIGIN, Position(4, 0))
    assert result.found
    assert result.path == [Position(x, 0) for x in range(5)]
    assert result.expanded >= 5
    assert result.stats() == {
        "expanded": result.expanded,
        "reopened": result.reopened,
        "relaxed": result.relaxed,
    }


def test_unreachable_search_expands_whole_component() -> None:
    blocked = {Position(1, 0), Position(1, 1), Position(1, 2)}
    result = AStarPathFinder().search(3, 3, ORIGIN, Position(2, 2), blocked)
    assert result.path is None
    assert result.expanded == 3


def test_zero_heuristic_still_finds_shortest_path() -> None:
    blocked = {Position(2, 3), Position(2, 4), Position(4, 3)}
    finder = AStarPathFinder(heuristic=zero_distance)
    path = finder.find_path(5, 5, ORIGIN, CORNER, blocked)
    assert path is not None
    assert len(path) == 9


def test_inconsistent_heuristic_reopens_closed_and_relaxes_open_nodes() -> None:
    estimates = {
        (0, 0): 0, (0, 1): 2, (0, 2): 3, (0, 3): 4,
        (1, 0): 3, (1, 1): 3, (1, 2): 3, (1, 3): 4,
        (2, 0): 3, (2, 1): 1, (2, 2): 2, (2, 3): 0,
        (3, 0): 0, (3, 1): 1, (3, 2): 3, (3, 3): 1,
    }

    def table(a: Position, b: Position) -> int:
        return estimates[(a.x, a.y)]

    goal = Position(3, 3)
    result = AStarPathFinder(heuristic=table).search(4, 4, ORIGIN, goal)

    assert result.reopened >= 1
    assert result.relaxed >= 1
    assert result.path is not None
    assert is_valid_path(4, 4, ORIGIN, goal, None, result.path)


def test_matches_breadth_first_length_on_random_grids() -> None:
    rng = random.Random(1234)
    astar = AStarPathFinder()
    reference = BreadthFirstPathFinder()

    for _ in range(60):
        width = rng.randint(2, 12)
        height = rng.randint(2, 12)
        cells = [Position(x, y) for x in range(width) for y in range(height)]
        start, goal = rng.sample(cells, 2)
        blocked = {
            cell
            for cell in cells
            if cell not in (start, goal) and rng.random() < 0.3
        }

        expected = reference.find_path(width, height, start, goal, blocked)
        path = astar.find_path(width, height, start, goal, blocked)

        assert (path is None) == (expected is None)
        if path is not None and expected is not None:
            assert len(path) == len(expected)
            assert is_valid_path(width, height, start, goal, blocked, path)


def test_search_node_f_tracks_g_and_h() -> None:
    node = SearchNode(position=Position(1, 2), parent=None, g=3, h=4)
    assert node.f == 7
