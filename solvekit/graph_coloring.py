"""Adjacency construction and two-colouring of undirected graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence


def build_adjacency(edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    """Return an undirected adjacency mapping for the given ``(u, v)`` edges.

    Node identifiers are used as given. Each edge is recorded in both
    directions, in the order the edges are supplied.
    """
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v, *_ in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return dict(adjacency)


def is_bipartite(n: int, adjacency: Mapping[int, Sequence[int]]) -> bool:
    """Tell whether the graph on nodes ``0 .. n-1`` can be two-coloured.

    A self-loop makes a graph non-bipartite.
    """
    colors: dict[int, int] = {}
    for start in range(n):
        if start in colors:
            continue
        colors[start] = 1
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in adjacency.get(node, ()):
                if neighbour not in colors:
                    colors[neighbour] = 1 - colors[node]
                    pending.append(neighbour)
                elif colors[neighbour] == colors[node]:
                    return False
    return True