import random

import pytest

from algobasis.heap import MaxHeap, heap_sort, heap_sort_by_insertion


def test_insert_then_extract_descending():
    items = [5, 1, 9, 3, 7, 7, 2]
    heap = MaxHeap(len(items))
    for item in items:
        heap.insert(item)
    assert len(heap) == len(items)
    out = [heap.extract_max() for _ in items]
    assert out == sorted(items, reverse=True)
    assert heap.is_empty()


def test_from_items_peek_is_maximum():
    items = [4, 12, 8, 30, 1]
    heap = MaxHeap.from_items(items)
    assert heap.peek() == max(items)
    assert len(heap) == len(items)


def test_full_heap_rejects_insert():
    heap = MaxHeap(1)
    heap.insert(3)
    with pytest.raises(IndexError):
        heap.insert(4)


def test_empty_heap_errors():
    heap = MaxHeap(3)
    with pytest.raises(IndexError):
        heap.extract_max()
    with pytest.raises(IndexError):
        heap.peek()


def test_negative_capacity():
    with pytest.raises(ValueError):
        MaxHeap(-1)


@pytest.mark.parametrize("sort", [heap_sort, heap_sort_by_insertion])
def test_heap_sorts(sort):
    rng = random.Random(7)
    arr = [rng.randint(0, 50) for _ in range(200)]
    expected = sorted(arr)
    sort(arr)
    assert arr == expected


@pytest.mark.parametrize("sort", [heap_sort, heap_sort_by_insertion])
def test_heap_sorts_empty(sort):
    arr = []
    sort(arr)
    assert arr == []


def test_render_single_item():
    heap = MaxHeap.from_items([3])
    assert heap.render() == "The Heap size is: 1\ndata in heap: 3 \n\n3 "


def test_render_three_items():
    heap = MaxHeap.from_items([10, 5, 3])
    assert heap.render().split("\n")[3:] == ["  10 ", " / \\ ", "5   3"]


def test_render_line_widths():
    heap = MaxHeap.from_items(range(7))
    lines = heap.render().split("\n")
    tree = lines[3:]
    assert len(tree) == 5
    assert all(len(line) == 4 * 3 - 1 for line in tree)


def test_render_rejects_large_heap():
    heap = MaxHeap.from_items(range(100))
    with pytest.raises(ValueError):
        heap.render()


def test_render_rejects_non_int():
    heap = MaxHeap.from_items([1.5, 2.5])
    with pytest.raises(ValueError):
        heap.render()