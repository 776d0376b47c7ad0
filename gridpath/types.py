"""Shared type aliases for the search engine and grid helpers."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)

Coord = Tuple[int, int]  # (row, col)

NeighborFn = Callable[[V], Iterable[V]]
ParentMap = Dict[V, Optional[V]]
Path = List[V]

__all__ = [
    "V",
    "Coord",
    "NeighborFn",
    "ParentMap",
    "Path",
]
