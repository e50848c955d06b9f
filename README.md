# solvekit

A small library of self-contained algorithms: graph two-colouring and
grouping, shortest paths, array and subarray problems, grid traversal, string
manipulation, number puzzles, and helpers for linked lists and binary trees.

There are no runtime dependencies. Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `solvekit.graph_coloring`: `build_adjacency`, `is_bipartite`
- `solvekit.grouping`: `bfs_depth`, `magnificent_sets`
- `solvekit.shortest_paths`: `modified_graph_edges`, `minimum_conversion_cost`
- `solvekit.arrays`: `prefix_common_array`, `surviving_robot_healths`,
  `min_equal_sum`, `lexicographically_smallest_array`, `divide_array`,
  `largest_perimeter`, `min_operations_to_threshold`, `distinct_color_counts`,
  `repair_cars`
- `solvekit.subarrays`: `count_complete_subarrays`, `count_subarrays_with_max`,
  `longest_monotonic_subarray`, `count_alternating_groups`,
  `maximum_triplet_value`, `is_array_special`, `valid_xor_original_exists`
- `solvekit.nodes`: `ListNode`, `TreeNode`, `kth_largest_level_sum`,
  `insert_greatest_common_divisors`, `remove_listed_values`
- `solvekit.grids`: `max_moves`, `find_missing_and_repeated`
- `solvekit.strings`: `min_length_after_removals`, `can_make_subsequence`,
  `maximum_odd_binary_number`, `minimum_steps`, `minimum_pushes`,
  `count_prefix_suffix_pairs`, `score_of_string`, `clear_digits`,
  `minimum_length_after_operations`
- `solvekit.numbers`: `pass_the_pillow`, `colored_cells`, `punishment_number`,
  `count_symmetric_integers`, `number_of_powerful_int`,
  `max_height_of_triangle`, `longest_common_prefix`

## Examples

```python
from solvekit.grouping import magnificent_sets
from solvekit.nodes import ListNode, insert_greatest_common_divisors
from solvekit.shortest_paths import minimum_conversion_cost
from solvekit.strings import clear_digits

# Largest number of groups the nodes 1..6 can be split into (-1 if none).
magnificent_sets(6, [[1, 2], [1, 4], [1, 5], [2, 6], [2, 3], [4, 6]])

# Linked lists are built from and turned back into Python lists.
head = ListNode.from_values([18, 6, 10, 3])
insert_greatest_common_divisors(head).to_list()

# Cheapest letter-by-letter conversion with chained change rules.
minimum_conversion_cost("abcd", "acbe", ["a", "b", "c", "c", "e", "d"],
                        ["b", "c", "b", "e", "b", "e"], [2, 5, 5, 1, 2, 20])

# Each digit removes the closest letter to its left.
clear_digits("cb34")
```

Where a problem has no answer, functions return the value it specifies
(usually `-1` or an empty list). Malformed input, such as sequences of
mismatched length or an empty sequence where a value is required, raises
`ValueError`.

## What is not included

The package has no disjoint-set (union-find) structure and no connectivity
functions built on one: it does not count complete components, decide
traversal by shared prime factors, or answer minimum-cost walk queries.
Graph work is limited to two-colouring, breadth-first grouping and
Dijkstra shortest paths. There is no command-line interface.