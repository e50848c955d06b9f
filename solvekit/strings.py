"""String problems: removals, subsequences, binary strings and keypads."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise

_KEYS = 8


def min_length_after_removals(s: str) -> int:
    """Return the length left after repeatedly deleting ``"AB"`` and ``"CD"``."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in ("AB", "CD"):
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def _reaches(before: str, after: str) -> bool:
    """Tell whether ``before`` becomes ``after`` with at most one cyclic increment."""
    return (
        before == after
        or ord(before) + 1 == ord(after)
        or ord(before) - 25 == ord(after)
    )


def can_make_subsequence(str1: str, str2: str) -> bool:
    """Tell whether incrementing some letters of ``str1`` makes ``str2`` a subsequence."""
    matched = 0
    for ch in str1:
        if matched < len(str2) and _reaches(ch, str2[matched]):
            matched += 1
    return matched == len(str2)


def maximum_odd_binary_number(s: str) -> str:
    """Rearrange the bits into the largest odd binary number.

    A string without any ``'1'`` comes back as all zeros.
    """
    ones = s.count("1")
    if not ones:
        return "0" * len(s)
    return "1" * (ones - 1) + "0" * (len(s) - ones) + "1"


def minimum_steps(s: str) -> int:
    """Return the adjacent swaps needed to move every ``'1'`` to the right."""
    swaps = 0
    black = 0
    for ch in s:
        if ch == "0":
            swaps += black
        else:
            black += 1
    return swaps


def minimum_pushes(word: str) -> int:
    """Return the fewest key presses to type ``word`` on an eight-key keypad.

    Letters are mapped freely onto the keys; the ``i``-th letter on a key
    costs ``i`` presses.
    """
    if len(word) <= _KEYS:
        return len(word)
    frequencies = sorted(Counter(word).values(), reverse=True)
    return sum(
        frequency * (rank // _KEYS + 1) for rank, frequency in enumerate(frequencies)
    )


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count pairs ``i < j`` where ``words[i]`` is both prefix and suffix of ``words[j]``."""
    return sum(
        later.startswith(word) and later.endswith(word)
        for index, word in enumerate(words)
        for later in words[index + 1:]
    )


def score_of_string(s: str) -> int:
    """Return the sum of absolute code differences of adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def clear_digits(s: str) -> str:
    """Delete each digit together with the closest letter to its left."""
    kept: list[str] = []
    for ch in s:
        if "a" <= ch <= "z":
            kept.append(ch)
        elif kept:
            kept.pop()
    return "".join(kept)


def minimum_length_after_operations(s: str) -> int:
    """Return the length left after repeatedly dropping a letter's outer copies.

    A letter with copies on both sides of one of its occurrences may lose
    the nearest copy on each side.
    """
    return sum(1 if count % 2 else 2 for count in Counter(s).values())