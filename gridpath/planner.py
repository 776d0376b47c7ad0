"""Breadth-first grid planner driven by a boolean passability mask."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from gridpath.config import MAX_COORD
from gridpath.grid import GridSnapshot
from gridpath.types import Coord

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PathPlannerConfig:
    """Movement rule for mask-driven planning."""

    allow_diagonal: bool = False
    max_coord: int = MAX_COORD


class PathPlanner:
    """Compute grid paths using BFS over a boolean passability mask."""

    def __init__(self, config: PathPlannerConfig | None = None):
        self.config = config or PathPlannerConfig()

    def plan(self, passable: Sequence[Sequence[bool]] | np.ndarray, start: Coord, goal: Coord) -> List[Coord]:
        mask = np.asarray(passable, dtype=bool)
        if mask.ndim != 2 or mask.size == 0:
            return []
        rows, cols = mask.shape
        limit = self.config.max_coord + 1
        if rows > limit or cols > limit:
            LOGGER.debug("Mask %dx%d exceeds coordinate range [0, %d]", rows, cols, self.config.max_coord)
            return []
        if not self._in_bounds(start, rows, cols) or not self._in_bounds(goal, rows, cols):
            LOGGER.debug("Endpoint outside %dx%d mask: start=%s goal=%s", rows, cols, start, goal)
            return []
        if not mask[start[0], start[1]] or not mask[goal[0], goal[1]]:
            LOGGER.debug("Endpoint blocked: start=%s goal=%s", start, goal)
            return []
        snapshot = GridSnapshot.from_mask(
            mask,
            allow_diagonal=self.config.allow_diagonal,
            max_coord=self.config.max_coord,
        )
        return snapshot.shortest_path(start, goal)

    @staticmethod
    def _in_bounds(coord: Coord, rows: int, cols: int) -> bool:
        r, c = coord
        return 0 <= r < rows and 0 <= c < cols
