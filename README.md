# algobasis

Classic algorithms and data structures in plain Python, with no third-party
dependencies.

## Contents

- `algobasis.sorting` provides in-place sorts for mutable sequences:
  `bubble_sort`, `selection_sort`, `insertion_sort`, `insertion_sort_range`,
  `insertion_sort_improved`, `shell_sort`, `merge_sort`, `merge_sort_bottom_up`,
  `quick_sort`, `quick_sort_3way`, `quick_sort_insertion`, `quick_sort_random` and
  `quick_sort_random_2way`.
- `algobasis.heap` provides `MaxHeap`, a bounded max-heap. It has `insert`,
  `extract_max`, `peek`, `is_empty`, `len()`, `MaxHeap.from_items` and `render`,
  which draws a small heap of integers 0..99 as a text tree. The module also has
  `heap_sort` and `heap_sort_by_insertion`.
- `algobasis.search` provides `iterative_search` and `recursive_search`. Both run a
  binary search over a sorted sequence and return a bool.
- `algobasis.bst` provides `BinarySearchTree`, a symbol table with `insert`,
  `contains`, `search`, `remove`, `min_item`, `max_item`, `remove_min`,
  `remove_max`, and the traversal generators `pre_order`, `in_order`,
  `post_order` and `level_order`. Each generator yields `(key, value)` pairs.
- `algobasis.sequence_st` provides `SequenceST`, a symbol table backed by a linked
  list. It has the same `insert`, `contains`, `search` and `remove` as the tree.
- `algobasis.union_find` provides three disjoint-set forests: `UnionFindRank`,
  `UnionFindPathCompression` and `UnionFindSize`. Each has `find`,
  `is_connected` and `union`.
- `algobasis.graph` provides `DenseGraph`, an adjacency matrix, and `SparseGraph`,
  adjacency lists. Both have `add_edge`, `has_edge`, `adjacent` and `show`. The
  module also has `read_graph` and `Components`. `read_graph` loads a graph file
  whose first line holds "V E" and whose following lines each hold one edge.
  `Components` finds connected components.
- `algobasis.leetcode` provides `reverse_words`, `move_zeroes`, `super_egg_drop`
  and `super_egg_drop_dp`.
- `algobasis.solutions` provides small contest problems: `min_fund_cost`,
  `max_divisible_by_three`, `min_tap_load`, `rsa_decrypt` and `find_min_abs`.
- `algobasis.linear` provides `SeqList`, a bounded list with 1-based positions.
  The module also has `union_into` and `add_digits`, which adds two digit lists.
- `algobasis.preamble` provides `factorial`, `Student` and `StudentList`.
  `StudentList` supports `insert_sorted`, `delete` and `display`.
- `algobasis.iostreams` provides `copy_stream` and `send_file`, which copy data in
  fixed-size blocks.
- `algobasis.tools` provides array generators, `is_sorted`, `split_words`,
  `read_words` and `format_array`. It also provides timing helpers that return a
  `TimingReport`: `benchmark_sort`, `benchmark_search`, `benchmark_union_find` and
  `benchmark_word_count`.

## Installation

```
pip install .
```

## Example

```python
from algobasis.sorting import quick_sort_3way
from algobasis.bst import BinarySearchTree
from algobasis.union_find import UnionFindSize

data = [5, 3, 9, 1]
quick_sort_3way(data)
print(data)  # [1, 3, 5, 9]

tree = BinarySearchTree()
tree.insert("god", 1)
print(tree.search("god"))  # 1

uf = UnionFindSize(10)
uf.union(1, 2)
print(uf.is_connected(1, 2))  # True
```

## Commands

`algobasis-bench` times the sorting and searching routines on generated arrays.

```
algobasis-bench sort --size 4096 --suite quadratic
algobasis-bench sort --suite fast
algobasis-bench search --length 10000000 --needle 777
```

The `sort` subcommand times each sort in the chosen suite on a random array and on
a nearly ordered array. The suite is `quadratic` (the default) or `fast`, and
`--size` defaults to 65536. The `search` subcommand times both binary searches.

`algobasis-cat` copies standard input to standard output in blocks of
`--buffer-size` bytes. The default block size is 4096.

```
algobasis-cat < input.txt > output.txt
```

## What it does not do

The contest solutions in `algobasis.solutions` are plain functions. They do not
read problem input from standard input. The only commands are the two above.
Graphs and word lists come from files that you supply to `read_graph` and
`read_words`. No sample data ships with the package.

## Tests

```
pip install .[test]
pytest
```