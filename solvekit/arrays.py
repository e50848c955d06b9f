"""Array problems: sorting, greedy merging, collisions and binary search."""

from __future__ import annotations

import heapq
import math
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return, for each prefix length, how many values of ``a``'s prefix occur in ``b``'s.

    Raises ValueError when the sequences differ in length.
    """
    seen_in_b: set[int] = set()
    result: list[int] = []
    for length, (_, b_value) in enumerate(zip(a, b, strict=True), start=1):
        seen_in_b.add(b_value)
        result.append(sum(value in seen_in_b for value in a[:length]))
    return result


def surviving_robot_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Return the healths of the robots left after all collisions, in input order.

    Robots moving ``'R'`` meet robots moving ``'L'`` further along the line.
    The weaker robot is removed and the stronger loses one health; equal
    robots both disappear.
    """
    health = list(healths)
    order = sorted(range(len(positions)), key=lambda index: positions[index])
    moving_right: list[int] = []
    for current in order:
        if directions[current] == "R":
            moving_right.append(current)
            continue
        while moving_right and health[current] > 0:
            top = moving_right.pop()
            if health[top] > health[current]:
                health[top] -= 1
                health[current] = 0
                moving_right.append(top)
            elif health[top] < health[current]:
                health[current] -= 1
                health[top] = 0
            else:
                health[current] = 0
                health[top] = 0
    return [value for value in health if value > 0]


def min_equal_sum(nums1: Iterable[int], nums2: Iterable[int]) -> int:
    """Return the least equal sum reachable by replacing zeros with positive integers.

    Returns -1 when the sums cannot be made equal.
    """
    values1 = list(nums1)
    values2 = list(nums2)
    zeros1 = values1.count(0)
    zeros2 = values2.count(0)
    sum1 = sum(values1) + zeros1
    sum2 = sum(values2) + zeros2
    if (sum1 < sum2 and zeros1 == 0) or (sum2 < sum1 and zeros2 == 0):
        return -1
    return max(sum1, sum2)


def lexicographically_smallest_array(nums: Sequence[int], limit: int) -> list[int]:
    """Return the smallest arrangement reachable by swapping values at most ``limit`` apart."""
    if not nums:
        return []
    ordered = sorted(nums)
    group_of: dict[int, int] = {}
    members: defaultdict[int, deque[int]] = defaultdict(deque)
    group = 0
    previous = ordered[0]
    for value in ordered:
        if abs(value - previous) > limit:
            group += 1
        group_of[value] = group
        members[group].append(value)
        previous = value
    return [members[group_of[value]].popleft() for value in nums]


def divide_array(nums: Iterable[int], k: int) -> list[list[int]]:
    """Split the values into sorted triples whose spread is at most ``k``.

    Returns an empty list when that is impossible. Raises ValueError when
    the number of values is not a multiple of three.
    """
    ordered = sorted(nums)
    if len(ordered) % 3:
        raise ValueError("the number of values must be a multiple of three")
    triples = [ordered[start:start + 3] for start in range(0, len(ordered), 3)]
    if any(triple[2] - triple[0] > k for triple in triples):
        return []
    return triples


def largest_perimeter(nums: Iterable[int]) -> int:
    """Return the largest perimeter of a polygon built from the side lengths, or -1."""
    perimeter = 0
    running = 0
    for side in sorted(nums):
        if side < running:
            perimeter = side + running
        running += side
    return perimeter if perimeter else -1


def min_operations_to_threshold(nums: Iterable[int], k: int) -> int:
    """Count merges of the two smallest values ``x, y`` into ``2x + y`` until all reach ``k``.

    Raises ValueError when a single value below ``k`` is left to merge.
    """
    heap = list(nums)
    heapq.heapify(heap)
    operations = 0
    while heap and heap[0] < k:
        smallest = heapq.heappop(heap)
        if not heap:
            raise ValueError("a value below the threshold has nothing to merge with")
        second = heapq.heappop(heap)
        heapq.heappush(heap, smallest * 2 + second)
        operations += 1
    return operations


def distinct_color_counts(limit: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Return the number of distinct colours in use after each ``(ball, colour)`` query."""
    color_counts: Counter[int] = Counter()
    ball_color: dict[int, int] = {}
    result: list[int] = []
    for ball, color in queries:
        previous = ball_color.get(ball)
        if previous is not None:
            color_counts[previous] -= 1
            if not color_counts[previous]:
                del color_counts[previous]
        ball_color[ball] = color
        color_counts[color] += 1
        result.append(len(color_counts))
    return result


def _can_repair(ranks: Sequence[int], minutes: int, cars: int) -> bool:
    return sum(math.isqrt(minutes // rank) for rank in ranks) >= cars


def repair_cars(ranks: Sequence[int], cars: int) -> int:
    """Return the least time in which mechanics of the given ranks repair ``cars`` cars.

    A mechanic of rank ``r`` repairs ``n`` cars in ``r * n * n`` minutes.
    Returns -1 when ``cars`` is zero. Raises ValueError for no mechanics.
    """
    if not ranks:
        raise ValueError("ranks must not be empty")
    low = 1
    high = max(ranks) * cars * cars
    result = -1
    while low <= high:
        middle = (low + high) // 2
        if _can_repair(ranks, middle, cars):
            result = middle
            high = middle - 1
        else:
            low = middle + 1
    return result