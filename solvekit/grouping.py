"""Splitting a graph's nodes into the largest number of adjacent-level groups."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence

from solvekit.graph_coloring import build_adjacency, is_bipartite


def bfs_depth(adjacency: Mapping[int, Sequence[int]], start: int) -> int:
    """Return the number of breadth-first levels reachable from ``start``.

    An isolated node has a single level.
    """
    visited = {start}
    frontier = [start]
    levels = 0
    while frontier:
        levels += 1
        following: list[int] = []
        for node in frontier:
            for neighbour in adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return levels


def _components(n: int, adjacency: Mapping[int, Sequence[int]]) -> Iterable[list[int]]:
    """Yield the node lists of the connected components of ``0 .. n-1``."""
    seen: set[int] = set()
    for start in range(n):
        if start in seen:
            continue
        seen.add(start)
        members = [start]
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in adjacency.get(node, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    members.append(neighbour)
                    pending.append(neighbour)
        yield members


def magnificent_sets(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the largest number of groups the nodes ``1 .. n`` can be split into.

    Every edge must join nodes in groups whose indices differ by exactly one.
    Returns -1 when no such split exists, that is when the graph is not
    bipartite.
    """
    adjacency = build_adjacency((u - 1, v - 1) for u, v, *_ in edges)
    if not is_bipartite(n, adjacency):
        return -1
    return sum(
        max(bfs_depth(adjacency, node) for node in component)
        for component in _components(n, adjacency)
    )