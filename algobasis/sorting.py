"""In-place comparison sorts over mutable sequences."""

from __future__ import annotations

import random
from typing import Any, Callable, MutableSequence

_INSERTION_CUTOFF = 15


def bubble_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by repeatedly swapping adjacent out-of-order items."""
    n = len(arr)
    for i in range(n):
        for j in range(n - 1 - i):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by selecting the minimum of the unsorted tail."""
    n = len(arr)
    for i in range(n):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]


def insertion_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by swapping each item back into position."""
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j] < arr[j - 1]:
            arr[j], arr[j - 1] = arr[j - 1], arr[j]
            j -= 1


def insertion_sort_range(arr: MutableSequence[Any], left: int, right: int) -> None:
    """Sort ``arr[left..right]`` (inclusive) in place by insertion."""
    for i in range(left + 1, right + 1):
        item = arr[i]
        j = i
        while j > left and arr[j - 1] > item:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = item


def insertion_sort_improved(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by insertion, shifting instead of swapping."""
    for i in range(1, len(arr)):
        item = arr[i]
        j = i
        while j > 0 and item < arr[j - 1]:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = item


def shell_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place using the 3h+1 gap sequence."""
    n = len(arr)
    gap = 1
    while gap < n // 3:
        gap = gap * 3 + 1
    while gap > 0:
        for i in range(gap, n):
            item = arr[i]
            j = i
            while j >= gap and item < arr[j - gap]:
                arr[j] = arr[j - gap]
                j -= gap
            arr[j] = item
        gap //= 3


def _merge(arr: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    aux = list(arr[left : right + 1])
    i, j = left, mid + 1
    for k in range(left, right + 1):
        if i > mid:
            arr[k] = aux[j - left]
            j += 1
        elif j > right:
            arr[k] = aux[i - left]
            i += 1
        elif aux[i - left] < aux[j - left]:
            arr[k] = aux[i - left]
            i += 1
        else:
            arr[k] = aux[j - left]
            j += 1


def _merge_sort(arr: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(arr, left, mid)
    _merge_sort(arr, mid + 1, right)
    _merge(arr, left, mid, right)


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with top-down merge sort."""
    _merge_sort(arr, 0, len(arr) - 1)


def merge_sort_bottom_up(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by merging runs of doubling size."""
    n = len(arr)
    size = 1
    while size <= n:
        for start in range(0, n - size, 2 * size):
            _merge(arr, start, start + size - 1, min(start + 2 * size - 1, n - 1))
        size *= 2


def _swap_random_pivot(arr: MutableSequence[Any], left: int, right: int) -> None:
    pick = random.randint(left, right)
    arr[left], arr[pick] = arr[pick], arr[left]


def _partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    pivot = arr[left]
    j = left
    for i in range(left + 1, right + 1):
        if arr[i] < pivot:
            j += 1
            arr[j], arr[i] = arr[i], arr[j]
    arr[left], arr[j] = arr[j], arr[left]
    return j


def _random_partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    _swap_random_pivot(arr, left, right)
    return _partition(arr, left, right)


def _two_way_partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    _swap_random_pivot(arr, left, right)
    pivot = arr[left]
    i, j = left + 1, right
    while True:
        while i <= right and arr[i] < pivot:
            i += 1
        while j >= left + 1 and arr[j] > pivot:
            j -= 1
        if i > j:
            break
        arr[i], arr[j] = arr[j], arr[i]
        i += 1
        j -= 1
    arr[left], arr[j] = arr[j], arr[left]
    return j


def _quick_sort(
    arr: MutableSequence[Any],
    left: int,
    right: int,
    partition: Callable[[MutableSequence[Any], int, int], int],
    cutoff: int | None,
) -> None:
    # Recurse into the smaller side and loop on the larger to keep the stack shallow.
    while True:
        if cutoff is not None and right - left <= cutoff:
            insertion_sort_range(arr, left, right)
            return
        if left >= right:
            return
        p = partition(arr, left, right)
        if p - left < right - p:
            _quick_sort(arr, left, p - 1, partition, cutoff)
            left = p + 1
        else:
            _quick_sort(arr, p + 1, right, partition, cutoff)
            right = p - 1


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with quicksort, pivoting on the first item."""
    _quick_sort(arr, 0, len(arr) - 1, _partition, None)


def quick_sort_insertion(arr: MutableSequence[Any]) -> None:
    """Quicksort that hands small ranges to insertion sort."""
    _quick_sort(arr, 0, len(arr) - 1, _partition, _INSERTION_CUTOFF)


def quick_sort_random(arr: MutableSequence[Any]) -> None:
    """Quicksort with a random pivot and an insertion-sort cutoff."""
    _quick_sort(arr, 0, len(arr) - 1, _random_partition, _INSERTION_CUTOFF)


def quick_sort_random_2way(arr: MutableSequence[Any]) -> None:
    """Quicksort with a random pivot and two-pointer partitioning."""
    _quick_sort(arr, 0, len(arr) - 1, _two_way_partition, _INSERTION_CUTOFF)


def _quick_sort_3way(arr: MutableSequence[Any], left: int, right: int) -> None:
    while right - left > _INSERTION_CUTOFF:
        _swap_random_pivot(arr, left, right)
        pivot = arr[left]
        lt, gt, i = left, right + 1, left + 1
        while i < gt:
            if arr[i] < pivot:
                arr[i], arr[lt + 1] = arr[lt + 1], arr[i]
                lt += 1
                i += 1
            elif arr[i] > pivot:
                arr[i], arr[gt - 1] = arr[gt - 1], arr[i]
                gt -= 1
            else:
                i += 1
        arr[left], arr[lt] = arr[lt], arr[left]
        if lt - left < right - gt:
            _quick_sort_3way(arr, left, lt - 1)
            left = gt
        else:
            _quick_sort_3way(arr, gt, right)
            right = lt - 1
    insertion_sort_range(arr, left, right)


def quick_sort_3way(arr: MutableSequence[Any]) -> None:
    """Quicksort with three-way partitioning, suited to many equal keys."""
    _quick_sort_3way(arr, 0, len(arr) - 1)