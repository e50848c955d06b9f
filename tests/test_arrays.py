import pytest

from solvekit.arrays import (
    distinct_color_counts,
    divide_array,
    largest_perimeter,
    lexicographically_smallest_array,
    min_equal_sum,
    min_operations_to_threshold,
    prefix_common_array,
    repair_cars,
    surviving_robot_healths,
)


def test_prefix_common_identical_arrays_count_every_prefix():
    values = [3, 1, 4, 2]
    assert prefix_common_array(values, values) == list(range(1, len(values) + 1))


def test_prefix_common_permutations_end_full_and_grow():
    a = [1, 3, 2, 4]
    b = [3, 1, 2, 4]
    result = prefix_common_array(a, b)
    assert result[-1] == len(a)
    assert all(x <= y for x, y in zip(result, result[1:]))
    assert all(count <= index + 1 for index, count in enumerate(result))


def test_prefix_common_length_mismatch():
    with pytest.raises(ValueError):
        prefix_common_array([1, 2], [1])


def test_robots_same_direction_never_meet():
    healths = [2, 17, 9, 15, 10]
    assert surviving_robot_healths([5, 4, 3, 2, 1], healths, "RRRRR") == healths


def test_robots_equal_health_destroy_each_other():
    assert surviving_robot_healths([1, 2], [7, 7], "RL") == []


def test_robots_stronger_survives_weakened_and_input_untouched():
    healths = [5, 3]
    result = surviving_robot_healths([1, 2], healths, "RL")
    assert len(result) == 1
    assert result[0] < 5
    assert healths == [5, 3]


def test_robots_moving_apart_survive():
    assert surviving_robot_healths([1, 2], [4, 6], "LR") == [4, 6]


def test_min_equal_sum_example():
    assert min_equal_sum([3, 2, 0, 1, 0], [6, 5, 0]) == 12


def test_min_equal_sum_without_zeros():
    assert min_equal_sum([1, 2], [3]) == sum([1, 2])
    assert min_equal_sum([1, 2], [4]) == -1


def test_smallest_array_large_limit_sorts():
    nums = [5, 1, 9, 3]
    assert lexicographically_smallest_array(nums, 100) == sorted(nums)


def test_smallest_array_zero_limit_keeps_distinct_values():
    nums = [5, 1, 9, 3]
    assert lexicographically_smallest_array(nums, 0) == nums


def test_smallest_array_is_permutation_and_empty():
    nums = [1, 7, 6, 18, 2, 1]
    assert sorted(lexicographically_smallest_array(nums, 3)) == sorted(nums)
    assert lexicographically_smallest_array([], 3) == []


def test_divide_array_triples_respect_limit():
    nums = [1, 3, 4, 8, 7, 9, 3, 5, 1]
    result = divide_array(nums, 2)
    assert [value for triple in result for value in triple] == sorted(nums)
    assert all(triple[2] - triple[0] <= 2 for triple in result)


def test_divide_array_impossible_and_bad_length():
    assert divide_array([1, 3, 3, 2, 7, 3], 3) == []
    with pytest.raises(ValueError):
        divide_array([1, 2], 5)


def test_largest_perimeter_cases():
    assert largest_perimeter([5, 5, 5]) == sum([5, 5, 5])
    assert largest_perimeter([5, 5, 50]) == -1
    assert largest_perimeter([1, 12, 1, 2, 5, 50, 3]) == 12


def test_min_operations_cases():
    assert min_operations_to_threshold([10, 20], 10) == 0
    assert min_operations_to_threshold([2, 11, 10, 1, 3], 10) == 2


def test_min_operations_lonely_small_value():
    with pytest.raises(ValueError):
        min_operations_to_threshold([1], 5)


def test_distinct_colors_distinct_balls_and_colors():
    queries = [[0, 10], [1, 11], [2, 12]]
    assert distinct_color_counts(4, queries) == list(range(1, len(queries) + 1))


def test_distinct_colors_recolouring_one_ball():
    queries = [[1, 4], [1, 5], [1, 6]]
    assert distinct_color_counts(1, queries) == [1] * len(queries)


def test_repair_cars_single_mechanic():
    ranks = [3]
    cars = 4
    assert repair_cars(ranks, cars) == ranks[0] * cars * cars


def test_repair_cars_more_mechanics_not_slower():
    assert repair_cars([4, 2, 3, 1], 10) <= repair_cars([4], 10)


def test_repair_cars_edge_cases():
    assert repair_cars([1, 2], 0) == -1
    with pytest.raises(ValueError):
        repair_cars([], 3)