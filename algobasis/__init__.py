"""Classic algorithms and data structures: sorting, searching, heaps, trees, union-find, graphs and small puzzles."""

__version__ = "0.1.0"

__all__ = [
    "tools",
    "sorting",
    "heap",
    "search",
    "bst",
    "sequence_st",
    "bench",
    "union_find",
    "graph",
    "leetcode",
    "solutions",
    "linear",
    "preamble",
    "iostreams",
]