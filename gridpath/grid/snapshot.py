"""Immutable grid configuration that feeds the BFS engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from numbers import Integral
from typing import Any, Callable, FrozenSet, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from gridpath.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_COORD,
    MAX_HEIGHT,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
)
from gridpath.search import shortest_path
from gridpath.types import Coord

from .adjacency import cardinal_neighbors, check_coord, neighbors_with_diagonals

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    """Bounds, obstacles and movement rule captured for one path request."""

    width: int
    height: int
    obstacles: FrozenSet[Coord] = field(default_factory=frozenset)
    allow_diagonal: bool = False
    max_coord: int = MAX_COORD

    def __post_init__(self) -> None:
        limit = self.max_coord + 1
        if not 1 <= self.width <= limit:
            raise ValueError(f"width must be in [1, {limit}], got {self.width}")
        if not 1 <= self.height <= limit:
            raise ValueError(f"height must be in [1, {limit}], got {self.height}")
        obstacles = frozenset(check_coord(o, self.max_coord) for o in self.obstacles)
        object.__setattr__(self, "obstacles", obstacles)

    # ------------------------------------------------------------ constructors
    @classmethod
    def from_mask(
        cls,
        passable: Sequence[Sequence[bool]] | np.ndarray,
        allow_diagonal: bool = False,
        max_coord: int = MAX_COORD,
    ) -> "GridSnapshot":
        """Build a snapshot from a row-major passability grid (``True`` = open)."""
        mask = np.asarray(passable, dtype=bool)
        if mask.ndim != 2 or mask.size == 0:
            raise ValueError(f"passability mask must be a non-empty 2-D grid, got shape {mask.shape}")
        height, width = mask.shape
        blocked = {(int(r), int(c)) for r, c in np.argwhere(~mask)}
        return cls(
            width=int(width),
            height=int(height),
            obstacles=frozenset(blocked),
            allow_diagonal=allow_diagonal,
            max_coord=max_coord,
        )

    def to_mask(self) -> np.ndarray:
        mask = np.ones((self.height, self.width), dtype=bool)
        for r, c in self.obstacles:
            if r < self.height and c < self.width:
                mask[r, c] = False
        return mask

    # ----------------------------------------------------------------- updates
    def with_obstacles(self, cells: Iterable[Coord]) -> "GridSnapshot":
        return replace(self, obstacles=self.obstacles | frozenset(tuple(c) for c in cells))

    def without_obstacles(self, cells: Iterable[Coord]) -> "GridSnapshot":
        return replace(self, obstacles=self.obstacles - frozenset(tuple(c) for c in cells))

    def resized(self, width: int, height: int) -> "GridSnapshot":
        # Obstacles outside the new bounds are kept; the filter ignores them.
        return replace(self, width=width, height=height)

    def toggled_diagonal(self) -> "GridSnapshot":
        return replace(self, allow_diagonal=not self.allow_diagonal)

    # ----------------------------------------------------------------- queries
    def in_bounds(self, pos: Coord) -> bool:
        r, c = pos
        return 0 <= r < self.height and 0 <= c < self.width

    def is_blocked(self, pos: Coord) -> bool:
        return tuple(pos) in self.obstacles

    def is_admissible(self, pos: Coord) -> bool:
        return self.in_bounds(pos) and not self.is_blocked(pos)

    def neighbor_fn(self) -> Callable[[Coord], List[Coord]]:
        """Return the filtered neighbor function handed to the search engine."""
        width, height = self.width, self.height
        obstacles = self.obstacles
        max_coord = self.max_coord
        adjacency = neighbors_with_diagonals if self.allow_diagonal else cardinal_neighbors

        def neighbors(pos: Coord) -> List[Coord]:
            return [
                (r, c)
                for r, c in adjacency(pos, max_coord)
                if c < width and r < height and (r, c) not in obstacles
            ]

        return neighbors

    def shortest_path(self, start: Coord, end: Coord) -> List[Coord]:
        start = check_coord(start, self.max_coord)
        end = check_coord(end, self.max_coord)
        return shortest_path(start, end, self.neighbor_fn())

    def compute_path(self, start: Optional[Coord], end: Optional[Coord]) -> FrozenSet[Coord]:
        """Cells to highlight for a start/end pair; empty if either marker is unset."""
        if start is None or end is None:
            LOGGER.debug("compute_path skipped: start=%s end=%s", start, end)
            return frozenset()
        if not self.in_bounds(start) or not self.in_bounds(end):
            LOGGER.debug("compute_path skipped: marker outside %dx%d grid", self.width, self.height)
            return frozenset()
        path = self.shortest_path(start, end)
        if not path:
            LOGGER.info("No path from %s to %s on %dx%d grid", start, end, self.width, self.height)
        return frozenset(path)


def build_snapshot(cfg: Mapping[str, Any]) -> GridSnapshot:
    """Build a snapshot from a plain config mapping, enforcing editor size limits."""
    width = _int_setting(cfg, "width", DEFAULT_WIDTH)
    height = _int_setting(cfg, "height", DEFAULT_HEIGHT)
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ValueError(f"width must be in [{MIN_WIDTH}, {MAX_WIDTH}], got {width}")
    if not MIN_HEIGHT <= height <= MAX_HEIGHT:
        raise ValueError(f"height must be in [{MIN_HEIGHT}, {MAX_HEIGHT}], got {height}")
    obstacles = frozenset(check_coord(o) for o in cfg.get("obstacles", ()))
    return GridSnapshot(
        width=width,
        height=height,
        obstacles=obstacles,
        allow_diagonal=bool(cfg.get("allow_diagonal", False)),
    )


def _int_setting(cfg: Mapping[str, Any], key: str, default: int) -> int:
    value = cfg.get(key, default)
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return int(value)
