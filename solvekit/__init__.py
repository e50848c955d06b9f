"""Self-contained algorithms for graphs, arrays, strings, numbers, grids and linked structures."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graph_coloring",
    "grids",
    "grouping",
    "nodes",
    "numbers",
    "shortest_paths",
    "strings",
    "subarrays",
]