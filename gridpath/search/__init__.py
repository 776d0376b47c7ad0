"""Search exports."""

from .bfs import bfs, path_cost, reconstruct_path, shortest_path

__all__ = [
    "bfs",
    "path_cost",
    "reconstruct_path",
    "shortest_path",
]
