"""Problems on square and rectangular grids of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def max_moves(grid: Sequence[Sequence[int]]) -> int:
    """Return the most moves possible starting from any cell of the first column.

    A move goes one column right to the row above, the same row or the row
    below, and only onto a strictly larger value. Raises ValueError for an
    empty grid.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows = len(grid)
    columns = list(zip(*grid))
    # reach[r] is the most moves available from row r of the column in hand.
    reach = [0] * rows
    for current, following in reversed(list(pairwise(columns))):
        reach = [
            max(
                (
                    reach[row] + 1
                    for row in (r - 1, r, r + 1)
                    if 0 <= row < rows and following[row] > value
                ),
                default=0,
            )
            for r, value in enumerate(current)
        ]
    return max(reach)


def find_missing_and_repeated(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for a grid meant to hold ``1 .. n*n`` once each.

    Raises ValueError unless exactly one value repeats and exactly one is
    missing.
    """
    values = [value for row in grid for value in row]
    counts = Counter(values)
    repeated = [value for value, count in counts.items() if count > 1]
    missing = set(range(1, len(values) + 1)) - counts.keys()
    if len(repeated) != 1 or len(missing) != 1:
        raise ValueError("grid must hold exactly one repeated and one missing value")
    return [repeated[0], missing.pop()]