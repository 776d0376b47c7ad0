"""Breadth-first shortest paths over implicit graphs and 2-D grids."""

from .grid import GridSnapshot, build_snapshot, cardinal_neighbors, neighbors_with_diagonals
from .planner import PathPlanner, PathPlannerConfig
from .search import bfs, path_cost, reconstruct_path, shortest_path

__version__ = "0.1.0"

__all__ = [
    "GridSnapshot",
    "PathPlanner",
    "PathPlannerConfig",
    "bfs",
    "build_snapshot",
    "cardinal_neighbors",
    "neighbors_with_diagonals",
    "path_cost",
    "reconstruct_path",
    "shortest_path",
]
