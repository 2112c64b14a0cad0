"""Load grids from ASCII maps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridpath.search.contracts import SearchRequest
from gridpath.search.position import Position

BLOCKED_TILE = "#"
OPEN_TILE = "."
START_TILE = "S"
GOAL_TILE = "G"

WALKABLE_TILES: set[str] = {OPEN_TILE, START_TILE, GOAL_TILE}


class GridMapError(ValueError):
    """Raised when an ASCII map cannot be turned into a grid."""


@dataclass(frozen=True)
class GridMap:
    lines: list[str]
    width: int
    height: int
    start: Position
    goal: Position
    blocked: frozenset[Position]

    def to_request(self) -> SearchRequest:
        return SearchRequest(
            width=self.width,
            height=self.height,
            start=self.start,
            goal=self.goal,
            blocked=self.blocked,
        )


def load_grid_map(path: Path) -> GridMap:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GridMapError(f"cannot read map {path}: {exc}") from exc
    return parse_grid_map(text)


def parse_grid_map(text: str) -> GridMap:
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise GridMapError("map is empty")

    width = len(lines[0])
    starts: list[Position] = []
    goals: list[Position] = []
    blocked: set[Position] = set()

    for y, line in enumerate(lines):
        if len(line) != width:
            raise GridMapError(
                f"row {y} has width {len(line)}, expected {width}"
            )
        for x, tile in enumerate(line):
            if tile == BLOCKED_TILE:
                blocked.add(Position(x, y))
            elif tile == START_TILE:
                starts.append(Position(x, y))
            elif tile == GOAL_TILE:
                goals.append(Position(x, y))
            elif tile not in WALKABLE_TILES:
                raise GridMapError(f"unknown tile {tile!r} at row {y}, column {x}")

    if len(starts) != 1:
        raise GridMapError(f"expected exactly one {START_TILE!r}, found {len(starts)}")
    if len(goals) != 1:
        raise GridMapError(f"expected exactly one {GOAL_TILE!r}, found {len(goals)}")

    return GridMap(
        lines=lines,
        width=width,
        height=len(lines),
        start=starts[0],
        goal=goals[0],
        blocked=frozenset(blocked),
    )
