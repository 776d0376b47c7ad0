"""Round-based breadth-first search and shortest-path reconstruction."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from gridpath.types import NeighborFn, ParentMap, Path, V

LOGGER = logging.getLogger(__name__)


def bfs(start: V, end: V, neighbor_fn: NeighborFn) -> ParentMap:
    """Map every discovered vertex to the vertex it was first reached from.

    The start vertex maps to ``None``. Expansion proceeds one frontier at a
    time and stops before the round that would expand past ``end``, so the map
    covers only the search horizon needed to reach it (or the whole reachable
    component when ``end`` is unreachable, in which case it is never a key).
    Neighbors are visited in the order ``neighbor_fn`` yields them.
    """
    parent_map: Dict[V, Optional[V]] = {start: None}
    frontier: List[V] = [start]
    rounds = 0
    while frontier:
        if end in parent_map:
            break
        next_frontier: List[V] = []
        for u in frontier:
            for v in neighbor_fn(u):
                if v in parent_map:
                    continue
                parent_map[v] = u
                next_frontier.append(v)
        frontier = next_frontier
        rounds += 1
    LOGGER.debug(
        "bfs %s -> %s: %d rounds, %d discovered, reached=%s",
        start,
        end,
        rounds,
        len(parent_map),
        end in parent_map,
    )
    return parent_map


def reconstruct_path(parent_map: ParentMap, end: V) -> Path:
    """Walk parent pointers back from ``end``; empty if ``end`` was never reached.

    ``parent_map`` is a map built by ``bfs``, whose first key is the start
    vertex. The walk stops on that key rather than on the ``None`` sentinel,
    so ``None`` may itself be a vertex.
    """
    path: List[V] = []
    if end not in parent_map:
        return path
    start = next(iter(parent_map))
    cur = end
    path.append(cur)
    while cur != start:
        cur = parent_map[cur]
        path.append(cur)
    path.reverse()
    return path


def shortest_path(start: V, end: V, neighbor_fn: NeighborFn) -> Path:
    """Return an edge-minimal path from ``start`` to ``end`` inclusive.

    An unreachable ``end`` yields ``[]``; ``start == end`` yields ``[start]``.
    """
    return reconstruct_path(bfs(start, end, neighbor_fn), end)


def path_cost(path: Path) -> int:
    """Number of edges in ``path``, or ``-1`` for an empty (unreachable) path."""
    return len(path) - 1
