"""Raw 4- and 8-connected grid geometry with representation guards."""

from __future__ import annotations

from numbers import Integral
from typing import List, Sequence, Tuple

from gridpath.config import MAX_COORD
from gridpath.types import Coord

# Canonical order: up, down, left, right, then the diagonals.
CARDINAL_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def check_coord(pos: Sequence[Integral], max_coord: int = MAX_COORD) -> Coord:
    """Return ``pos`` as a plain ``(row, col)`` int tuple.

    Any integral axis type is accepted (numpy scalars included); ``bool``,
    floats and values outside ``[0, max_coord]`` raise ``ValueError``.
    """
    if len(pos) != 2:
        raise ValueError(f"coordinate must be a (row, col) pair, got {pos!r}")
    for axis in pos:
        if isinstance(axis, bool) or not isinstance(axis, Integral):
            raise ValueError(f"coordinate axes must be integers, got {pos!r}")
        if axis < 0 or axis > max_coord:
            raise ValueError(f"coordinate {pos!r} outside [0, {max_coord}]")
    return int(pos[0]), int(pos[1])


def _offset_neighbors(pos: Coord, offsets: Sequence[Coord], max_coord: int) -> List[Coord]:
    r, c = check_coord(pos, max_coord)
    out: List[Coord] = []
    for dr, dc in offsets:
        nr, nc = r + dr, c + dc
        if nr < 0 or nc < 0 or nr > max_coord or nc > max_coord:
            continue
        out.append((nr, nc))
    return out


def cardinal_neighbors(pos: Coord, max_coord: int = MAX_COORD) -> List[Coord]:
    """Up to four orthogonal neighbors that stay representable."""
    return _offset_neighbors(pos, CARDINAL_OFFSETS, max_coord)


def neighbors_with_diagonals(pos: Coord, max_coord: int = MAX_COORD) -> List[Coord]:
    """Cardinal neighbors followed by up to four diagonal ones."""
    return _offset_neighbors(pos, CARDINAL_OFFSETS + DIAGONAL_OFFSETS, max_coord)
