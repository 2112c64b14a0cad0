"""Terminal rendering helpers."""

from gridpath.render.grid_view import render_grid_lines, render_report

__all__ = ["render_grid_lines", "render_report"]
