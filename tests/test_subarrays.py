import random

import pytest

from solvekit.subarrays import (
    count_alternating_groups,
    count_complete_subarrays,
    count_subarrays_with_max,
    is_array_special,
    longest_monotonic_subarray,
    maximum_triplet_value,
    valid_xor_original_exists,
)


def test_complete_subarrays_example():
    assert count_complete_subarrays([1, 3, 1, 2, 2]) == 4


def test_complete_subarrays_all_equal_counts_every_subarray():
    nums = [5] * 6
    assert count_complete_subarrays(nums) == len(nums) * (len(nums) + 1) // 2


def test_complete_subarrays_distinct_values_only_whole():
    nums = list(range(7))
    assert count_complete_subarrays(nums) == count_complete_subarrays(nums[::-1])
    assert count_complete_subarrays(nums) == len([nums])


def test_complete_subarrays_empty():
    assert count_complete_subarrays([]) == 0


def test_subarrays_with_max_example():
    assert count_subarrays_with_max([1, 3, 2, 3, 3], 2) == 6


def test_subarrays_with_max_too_few_occurrences():
    assert count_subarrays_with_max([1, 4, 2, 1], 3) == 0


def test_subarrays_with_max_all_equal_k_one():
    nums = [2] * 5
    assert count_subarrays_with_max(nums, 1) == len(nums) * (len(nums) + 1) // 2


def test_subarrays_with_max_monotone_in_k():
    nums = [3, 1, 3, 3, 2, 3]
    counts = [count_subarrays_with_max(nums, k) for k in range(1, 6)]
    assert counts == sorted(counts, reverse=True)


def test_subarrays_with_max_errors():
    with pytest.raises(ValueError):
        count_subarrays_with_max([], 1)
    with pytest.raises(ValueError):
        count_subarrays_with_max([1, 2], 0)


def test_longest_monotonic_example():
    assert longest_monotonic_subarray([1, 4, 3, 3, 2]) == 2


def test_longest_monotonic_increasing_and_decreasing():
    nums = list(range(10))
    assert longest_monotonic_subarray(nums) == len(nums)
    assert longest_monotonic_subarray(nums[::-1]) == len(nums)


def test_longest_monotonic_constant_and_empty():
    assert longest_monotonic_subarray([3, 3, 3]) == len([3])
    assert longest_monotonic_subarray([]) == 0


def test_longest_monotonic_reverse_invariant():
    rng = random.Random(7)
    nums = [rng.randint(0, 5) for _ in range(40)]
    assert longest_monotonic_subarray(nums) == longest_monotonic_subarray(nums[::-1])


def test_alternating_groups_fully_alternating_circle():
    colors = [0, 1] * 3
    assert count_alternating_groups(colors, 3) == len(colors)


def test_alternating_groups_single_colour():
    assert count_alternating_groups([1, 1, 1, 1], 3) == 0


def test_alternating_groups_rotation_invariant():
    rng = random.Random(3)
    colors = [rng.randint(0, 1) for _ in range(20)]
    expected = count_alternating_groups(colors, 4)
    for shift in range(len(colors)):
        rotated = colors[shift:] + colors[:shift]
        assert count_alternating_groups(rotated, 4) == expected


def test_alternating_groups_empty():
    assert count_alternating_groups([], 3) == 0


def test_triplet_single_choice():
    a, b, c = 9, 4, 6
    assert maximum_triplet_value([a, b, c]) == (a - b) * c


def test_triplet_increasing_is_zero():
    assert maximum_triplet_value(list(range(1, 8))) == 0


def test_triplet_at_least_any_choice():
    rng = random.Random(11)
    nums = [rng.randint(1, 50) for _ in range(12)]
    best = maximum_triplet_value(nums)
    assert best >= (nums[0] - nums[1]) * nums[2]
    assert best >= 0


def test_is_array_special():
    assert is_array_special([1]) is True
    assert is_array_special([2, 1, 4]) is True
    assert is_array_special([4, 3, 1, 6]) is False


def test_valid_xor_examples():
    assert valid_xor_original_exists([1, 1, 0]) is True
    assert valid_xor_original_exists([1, 1]) is True
    assert valid_xor_original_exists([1, 0]) is False


def test_valid_xor_round_trip():
    rng = random.Random(5)
    original = [rng.randint(0, 1) for _ in range(15)]
    derived = [original[i] ^ original[(i + 1) % len(original)] for i in range(len(original))]
    assert valid_xor_original_exists(derived) is True


def test_valid_xor_empty_raises():
    with pytest.raises(ValueError):
        valid_xor_original_exists([])