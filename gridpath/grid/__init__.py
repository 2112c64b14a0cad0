"""ASCII grid maps."""

from gridpath.grid.loader import GridMap, GridMapError, load_grid_map, parse_grid_map

__all__ = ["GridMap", "GridMapError", "load_grid_map", "parse_grid_map"]
