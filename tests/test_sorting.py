import random

import pytest

from algobasis.sorting import (
    bubble_sort,
    insertion_sort,
    insertion_sort_improved,
    insertion_sort_range,
    merge_sort,
    merge_sort_bottom_up,
    quick_sort,
    quick_sort_3way,
    quick_sort_insertion,
    quick_sort_random,
    quick_sort_random_2way,
    selection_sort,
    shell_sort,
)
from algobasis.tools import is_sorted

ALL_SORTS = [
    bubble_sort,
    selection_sort,
    insertion_sort,
    insertion_sort_improved,
    shell_sort,
    merge_sort,
    merge_sort_bottom_up,
    quick_sort,
    quick_sort_3way,
    quick_sort_insertion,
    quick_sort_random,
    quick_sort_random_2way,
]


def _random_list(seed, n, hi):
    rng = random.Random(seed)
    return [rng.randint(0, hi) for _ in range(n)]


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
@pytest.mark.parametrize(
    "data",
    [
        [],
        [1],
        [2, 1],
        [5, 4, 3, 2, 1],
        [3, 3, 3, 1, 1, 2],
        list(range(40)),
        list(range(40, 0, -1)),
        [-5, 0, 12, -7, 3, 3, 0],
    ],
)
def test_sorts_small_inputs(sort, data):
    arr = list(data)
    sort(arr)
    assert is_sorted(arr)
    assert arr == sorted(data)


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
def test_sorts_random_input(sort):
    data = _random_list(7, 300, 300)
    arr = list(data)
    sort(arr)
    assert is_sorted(arr)
    assert arr == sorted(data)


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
def test_sorts_many_duplicates(sort):
    data = _random_list(11, 250, 3)
    arr = list(data)
    sort(arr)
    assert is_sorted(arr)
    assert arr == sorted(data)


@pytest.mark.parametrize(
    "sort",
    [quick_sort, quick_sort_insertion, quick_sort_random, quick_sort_random_2way, quick_sort_3way],
    ids=lambda f: f.__name__,
)
def test_quick_sorts_handle_long_sorted_input(sort):
    arr = list(range(3000))
    sort(arr)
    assert arr == list(range(3000))


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
def test_sorts_strings(sort):
    data = ["pear", "apple", "fig", "banana", "apple"]
    arr = list(data)
    sort(arr)
    assert is_sorted(arr)
    assert arr == sorted(data)


def test_insertion_sort_range_only_touches_range():
    arr = [9, 5, 4, 3, 8, 0]
    insertion_sort_range(arr, 1, 4)
    assert arr[0] == 9
    assert arr[5] == 0
    assert arr[1:5] == sorted([5, 4, 3, 8])


def test_insertion_sort_range_empty_range_is_noop():
    arr = [3, 2, 1]
    insertion_sort_range(arr, 2, 1)
    assert arr == [3, 2, 1]


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
def test_sort_keeps_same_multiset(sort):
    data = _random_list(23, 120, 50)
    arr = list(data)
    sort(arr)
    assert sorted(arr) == sorted(data)
    assert is_sorted(arr)


def test_direct_merge_and_quick_sort_agree():
    data = _random_list(5, 200, 100)
    merged = list(data)
    quicked = list(data)
    merge_sort(merged)
    quick_sort(quicked)
    assert merged == quicked == sorted(data)