"""Module entry point for `python -m gridpath`."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from rich.console import Console

from gridpath.app import DEFAULT_FINDER, FINDERS, run_search
from gridpath.grid.loader import load_grid_map
from gridpath.render.grid_view import render_report
from gridpath.search.contracts import SearchRequest
from gridpath.search.position import Position

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.log_level)
        request = _build_request(args)
    except ValueError as exc:
        parser.error(str(exc))

    report = run_search(request, finder_name=args.finder)
    Console().print(render_report(report))
    if not report.found:
        raise SystemExit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest path across a grid with blocked cells."
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="ASCII map file (# blocked, . open, S start, G goal).",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width.")
    parser.add_argument("--height", type=int, default=None, help="Grid height.")
    parser.add_argument("--start", default=None, help="Start cell as x,y.")
    parser.add_argument("--goal", default=None, help="Goal cell as x,y.")
    parser.add_argument(
        "--block",
        action="append",
        default=[],
        help="Blocked cell as x,y (repeatable).",
    )
    parser.add_argument(
        "--finder",
        choices=sorted(FINDERS),
        default=None,
        help=f"Search strategy (defaults to $GRIDPATH_FINDER or {DEFAULT_FINDER}).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (defaults to $GRIDPATH_LOG_LEVEL or {DEFAULT_LOG_LEVEL}).",
    )
    return parser


def _build_request(args: argparse.Namespace) -> SearchRequest:
    if args.map is not None:
        return load_grid_map(args.map).to_request()

    missing = [
        name
        for name in ("width", "height", "start", "goal")
        if getattr(args, name) is None
    ]
    if missing:
        flags = ", ".join(f"--{name}" for name in missing)
        raise ValueError(f"either --map or {flags} is required")

    return SearchRequest(
        width=args.width,
        height=args.height,
        start=Position.parse(args.start),
        goal=Position.parse(args.goal),
        blocked=frozenset(Position.parse(cell) for cell in args.block),
    )


def _configure_logging(level_name: str | None) -> None:
    level_str = (
        level_name or os.getenv("GRIDPATH_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    ).upper()
    if level_str not in LOG_LEVELS:
        raise ValueError(
            f"unknown log level {level_str!r}; expected one of: {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(
        level=getattr(logging, level_str),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


if __name__ == "__main__":
    main()
