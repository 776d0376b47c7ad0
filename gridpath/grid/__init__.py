"""Grid exports."""

from .adjacency import (
    CARDINAL_OFFSETS,
    DIAGONAL_OFFSETS,
    cardinal_neighbors,
    check_coord,
    neighbors_with_diagonals,
)
from .snapshot import GridSnapshot, build_snapshot

__all__ = [
    "CARDINAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "GridSnapshot",
    "build_snapshot",
    "cardinal_neighbors",
    "check_coord",
    "neighbors_with_diagonals",
]
