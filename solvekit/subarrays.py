"""Counting and measuring runs, windows and triplets inside sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, pairwise
from operator import xor


def count_complete_subarrays(nums: Iterable[int]) -> int:
    """Count the subarrays holding every distinct value of the whole sequence."""
    values = list(nums)
    distinct = len(set(values))
    window: Counter[int] = Counter()
    left = 0
    total = 0
    for right, value in enumerate(values):
        window[value] += 1
        while len(window) == distinct:
            total += len(values) - right
            leaving = values[left]
            window[leaving] -= 1
            if not window[leaving]:
                del window[leaving]
            left += 1
    return total


def count_subarrays_with_max(nums: Iterable[int], k: int) -> int:
    """Count the subarrays in which the overall maximum appears at least ``k`` times.

    Raises ValueError for an empty sequence or for ``k`` below one.
    """
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    top = max(values)
    positions: list[int] = []
    total = 0
    for index, value in enumerate(values):
        if value == top:
            positions.append(index)
        if len(positions) >= k:
            total += positions[-k] + 1
    return total


def longest_monotonic_subarray(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing or decreasing run."""
    values = list(nums)
    if not values:
        return 0
    best = increasing = decreasing = 1
    for previous, current in pairwise(values):
        increasing = increasing + 1 if current > previous else 1
        decreasing = decreasing + 1 if current < previous else 1
        best = max(best, increasing, decreasing)
    return best


def count_alternating_groups(colors: Sequence[int], k: int) -> int:
    """Count the windows of ``k`` circularly adjacent tiles whose colours alternate."""
    if not colors:
        return 0
    extended = list(colors) + [colors[index % len(colors)] for index in range(k - 1)]
    start = 0
    groups = 0
    for end in range(1, len(extended)):
        if extended[end] == extended[end - 1]:
            start = end
            continue
        if end - start + 1 == k:
            groups += 1
            start += 1
    return groups


def maximum_triplet_value(nums: Sequence[int]) -> int:
    """Return the largest ``(nums[i] - nums[j]) * nums[k]`` over ``i < j < k``, or 0."""
    values = list(nums)
    # right_max[j] is the largest value after index j, floored at zero.
    suffix = list(accumulate(reversed(values), max, initial=0))
    right_max = [suffix[len(values) - index - 1] for index in range(len(values))]
    best = 0
    left_max = 0
    for index, value in enumerate(values):
        if 0 < index < len(values) - 1:
            best = max(best, (left_max - value) * right_max[index])
        left_max = max(left_max, value)
    return best


def is_array_special(nums: Iterable[int]) -> bool:
    """Tell whether every pair of adjacent values differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def valid_xor_original_exists(derived: Sequence[int]) -> bool:
    """Tell whether some circular array XORs pairwise into ``derived``.

    Raises ValueError for an empty sequence.
    """
    if not derived:
        raise ValueError("derived must not be empty")
    return reduce(xor, derived, 0) == 0