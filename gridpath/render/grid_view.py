"""Rich rendering for grids, paths and search reports."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridpath.app import SearchReport
from gridpath.search.position import Position

BLOCKED_GLYPH = "#"
OPEN_GLYPH = "."
PATH_GLYPH = "*"
START_GLYPH = "S"
GOAL_GLYPH = "G"

TILE_STYLES = {
    BLOCKED_GLYPH: "bright_magenta",
    OPEN_GLYPH: "grey70",
    PATH_GLYPH: "bright_cyan",
    START_GLYPH: "bold bright_green",
    GOAL_GLYPH: "bold bright_yellow",
}


def render_grid_lines(
    width: int,
    height: int,
    *,
    start: Position,
    goal: Position,
    blocked: AbstractSet[Position] = frozenset(),
    path: Sequence[Position] | None = None,
) -> list[Text]:
    grid = [[OPEN_GLYPH] * width for _ in range(height)]
    for position in blocked:
        _place(grid, position, BLOCKED_GLYPH)
    for position in path or ():
        _place(grid, position, PATH_GLYPH)
    _place(grid, start, START_GLYPH)
    _place(grid, goal, GOAL_GLYPH)

    lines: list[Text] = []
    for row in grid:
        line = Text()
        for glyph in row:
            line.append(glyph, style=TILE_STYLES[glyph])
        lines.append(line)
    return lines


def render_report(report: SearchReport) -> RenderableType:
    request = report.request
    lines = render_grid_lines(
        request.width,
        request.height,
        start=request.start,
        goal=request.goal,
        blocked=request.blocked,
        path=report.path,
    )
    title = f"{request.width}x{request.height} grid, {report.finder_name}"
    return Group(Panel(Group(*lines), title=title), _render_summary(report))


def _render_summary(report: SearchReport) -> Table:
    table = Table(title="Search", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Start", str(report.request.start))
    table.add_row("Goal", str(report.request.goal))
    if report.path is None:
        table.add_row("Result", Text("no path", style="bold red"))
    else:
        table.add_row("Result", f"{len(report.path)} cells, {len(report.path) - 1} steps")
    for key, value in report.stats.items():
        table.add_row(key.capitalize(), str(value))
    table.add_row("Elapsed", f"{report.elapsed_ms:.2f} ms")
    return table


def _place(grid: list[list[str]], position: Position, glyph: str) -> None:
    if 0 <= position.y < len(grid) and 0 <= position.x < len(grid[0]):
        grid[position.y][position.x] = glyph
