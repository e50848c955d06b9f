"""Shortest-path problems solved with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence

LARGE_WEIGHT = 2 * 10**9


def _shortest_distance(
    n: int, edges: Iterable[Sequence[int]], source: int, destination: int
) -> float:
    """Return the shortest distance using only edges of known weight."""
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, weight in edges:
        if weight != -1:
            adjacency[u].append((v, weight))
            adjacency[v].append((u, weight))

    distance: list[float] = [math.inf] * n
    distance[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    settled: set[int] = set()
    while heap:
        current, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled.add(node)
        for neighbour, weight in adjacency[node]:
            candidate = current + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance[destination]


def modified_graph_edges(
    n: int,
    edges: Iterable[Sequence[int]],
    source: int,
    destination: int,
    target: int,
) -> list[list[int]]:
    """Give every ``-1`` edge a positive weight so the shortest path equals ``target``.

    Returns the edges as new ``[u, v, weight]`` lists in their given order,
    or an empty list when no assignment works. The input is not changed.
    """
    result = [list(edge) for edge in edges]
    current = _shortest_distance(n, result, source, destination)
    if current < target:
        return []

    matched = current == target
    for edge in result:
        if edge[2] != -1:
            continue
        if matched:
            edge[2] = LARGE_WEIGHT
            continue
        edge[2] = 1
        distance = _shortest_distance(n, result, source, destination)
        if distance <= target:
            matched = True
            edge[2] += int(target - distance)

    return result if matched else []


def _distances_from(
    start: str, adjacency: Mapping[str, Sequence[tuple[str, int]]]
) -> dict[str, int]:
    """Return the cheapest conversion cost from ``start`` to every reachable letter."""
    best: dict[str, int] = {}
    heap: list[tuple[int, str]] = [(0, start)]
    while heap:
        current, letter = heapq.heappop(heap)
        if current > best.get(letter, current):
            continue
        for following, weight in adjacency.get(letter, ()):
            candidate = current + weight
            if candidate < best.get(following, math.inf):
                best[following] = candidate
                heapq.heappush(heap, (candidate, following))
    return best


def minimum_conversion_cost(
    source: str,
    target: str,
    original: Sequence[str],
    changed: Sequence[str],
    cost: Sequence[int],
) -> int:
    """Return the least cost to turn ``source`` into ``target`` letter by letter.

    Each ``original[i] -> changed[i]`` change costs ``cost[i]`` and changes
    may be chained. Returns -1 when some letter cannot be converted. Raises
    ValueError when the strings or the rule lists differ in length.
    """
    if len(source) != len(target):
        raise ValueError("source and target must have the same length")
    adjacency: defaultdict[str, list[tuple[str, int]]] = defaultdict(list)
    for before, after, price in zip(original, changed, cost, strict=True):
        adjacency[before].append((after, price))

    distances: dict[str, dict[str, int]] = {}
    total = 0
    for before, after in zip(source, target):
        if before == after:
            continue
        if before not in distances:
            distances[before] = _distances_from(before, adjacency)
        price = distances[before].get(after)
        if price is None:
            return -1
        total += price
    return total