"""Integer puzzles: counting, digit manipulation and simulations."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def pass_the_pillow(n: int, time: int) -> int:
    """Return who holds the pillow after ``time`` seconds in a line of ``n`` people.

    The pillow starts with person 1 and bounces back at either end. Raises
    ValueError when fewer than two people stand in line.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    if time <= 0:
        return 1
    rounds, offset = divmod(time, n - 1)
    return offset + 1 if rounds % 2 == 0 else n - offset


def colored_cells(n: int) -> int:
    """Return the number of coloured cells after ``n`` minutes of growth."""
    return 1 + 2 * (n - 1) * n


def _splits_to(number: int, running: int, target: int) -> bool:
    """Tell whether the decimal digits of ``number`` split into pieces summing to ``target``."""
    if number == 0:
        return running == target
    return any(
        _splits_to(number // divisor, running + number % divisor, target)
        for divisor in (10, 100, 1000, 10000)
    )


def punishment_number(n: int) -> int:
    """Sum the squares of ``1 .. n`` whose digits split into pieces adding up to the root."""
    return sum(
        value * value for value in range(1, n + 1) if _splits_to(value * value, 0, value)
    )


def _is_symmetric(number: int) -> bool:
    digits = str(number)
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return sum(map(int, digits[:half])) == sum(map(int, digits[half:]))


def count_symmetric_integers(low: int, high: int) -> int:
    """Count numbers in ``[low, high]`` whose two digit halves have equal sums."""
    return sum(_is_symmetric(number) for number in range(low, high + 1))


def _powerful_up_to(bound: str, suffix: str, limit: int) -> int:
    """Count numbers in ``[0, bound]`` ending in ``suffix`` with every digit at most ``limit``."""
    if len(bound) < len(suffix):
        return 0
    prefix_length = len(bound) - len(suffix)
    base = limit + 1
    total = 0
    for position, ch in enumerate(bound[:prefix_length]):
        digit = int(ch)
        remaining = prefix_length - position - 1
        if digit <= limit:
            total += digit * base**remaining
        else:
            return total + base ** (remaining + 1)
    if bound[prefix_length:] >= suffix:
        total += 1
    return total


def number_of_powerful_int(start: int, finish: int, limit: int, s: str) -> int:
    """Count numbers in ``[start, finish]`` ending in ``s`` whose digits are at most ``limit``."""
    return _powerful_up_to(str(finish), s, limit) - _powerful_up_to(str(start - 1), s, limit)


def _triangle_rows(first: int, second: int) -> int:
    """Return the rows built when odd rows take ``first`` balls and even rows ``second``."""
    for row in count(1):
        if row % 2:
            first -= row
        else:
            second -= row
        if first < 0 or second < 0:
            return row - 1
    raise AssertionError("unreachable")


def max_height_of_triangle(red: int, blue: int) -> int:
    """Return the tallest triangle whose rows alternate between red and blue balls."""
    return max(_triangle_rows(red, blue), _triangle_rows(blue, red))


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Return the length of the longest digit prefix shared by a number of each array."""
    prefixes: set[int] = set()
    for value in arr1:
        while value > 0 and value not in prefixes:
            prefixes.add(value)
            value //= 10
    best = 0
    for value in arr2:
        while value > 0 and value not in prefixes:
            value //= 10
        if value > 0:
            best = max(best, len(str(value)))
    return best