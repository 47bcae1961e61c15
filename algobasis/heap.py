"""A bounded binary max-heap and the heap sorts built on it."""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence

_RENDER_LIMIT = 100


class MaxHeap:
    """A max-heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._data: list[Any] = []

    @classmethod
    def from_items(cls, items: Iterable[Any]) -> MaxHeap:
        """Build a full heap from ``items`` by heapifying them in place."""
        data = list(items)
        heap = cls(len(data))
        heap._data = data
        for k in range(len(data) // 2 - 1, -1, -1):
            heap._shift_down(k)
        return heap

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        """Return True if the heap holds no items."""
        return not self._data

    def insert(self, item: Any) -> None:
        """Add ``item``; raise IndexError if the heap is full."""
        if len(self._data) >= self.capacity:
            raise IndexError("heap is full")
        self._data.append(item)
        self._shift_up(len(self._data) - 1)

    def extract_max(self) -> Any:
        """Remove and return the largest item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("extract from an empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._shift_down(0)
        return top

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        if not self._data:
            raise IndexError("peek at an empty heap")
        return self._data[0]

    def _shift_up(self, k: int) -> None:
        data = self._data
        while k > 0:
            parent = (k - 1) // 2
            if not data[parent] < data[k]:
                break
            data[parent], data[k] = data[k], data[parent]
            k = parent

    def _shift_down(self, k: int) -> None:
        data = self._data
        n = len(data)
        while 2 * k + 1 < n:
            j = 2 * k + 1
            if j + 1 < n and data[j + 1] > data[j]:
                j += 1
            if data[k] >= data[j]:
                break
            data[k], data[j] = data[j], data[k]
            k = j

    def render(self) -> str:
        """Draw the heap as a text tree; items must be integers in 0..99."""
        size = len(self._data)
        if size >= _RENDER_LIMIT:
            raise ValueError("Fancy print can only work for less than 100 int")
        if any(type(item) is not int or not 0 <= item < 100 for item in self._data):
            raise ValueError("Fancy print can only work for int item")

        lines = [
            f"The Heap size is: {size}",
            "data in heap: " + "".join(f"{item} " for item in self._data),
            "",
        ]

        max_level = 0
        remaining, per_level = size, 1
        while remaining > 0:
            max_level += 1
            remaining -= per_level
            per_level *= 2
        if max_level == 0:
            return "\n".join(lines)

        max_level_number = 2 ** (max_level - 1)
        width = max_level_number * 3 - 1
        tree_number = max_level_number
        items = iter(self._data)
        for level in range(max_level):
            tree_width = tree_number * 3 - 1
            level_count = min(size - 2**level + 1, 2**level)

            numbers = [" "] * width
            for position in range(level_count):
                _put_number(numbers, next(items), position, tree_width, position % 2 == 0)
            lines.append("".join(numbers))

            if level == max_level - 1:
                break

            branches = [" "] * width
            for position in range(level_count):
                _put_branch(branches, position, tree_width)
            lines.append("".join(branches))
            tree_number //= 2
        return "\n".join(lines)


def _put_number(line: list[str], num: int, position: int, tree_width: int, is_left: bool) -> None:
    sub_width = (tree_width - 1) // 2
    offset = position * (tree_width + 1) + sub_width
    if num >= 10:
        line[offset] = str(num // 10)
        line[offset + 1] = str(num % 10)
    elif is_left:
        line[offset] = str(num)
    else:
        line[offset + 1] = str(num)


def _put_branch(line: list[str], position: int, tree_width: int) -> None:
    sub_width = (tree_width - 1) // 2
    sub_sub_width = (sub_width - 1) // 2
    base = position * (tree_width + 1)
    line[base + sub_sub_width + 1] = "/"
    line[base + sub_width + 1 + sub_sub_width] = "\\"


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by heapifying it and extracting maxima."""
    heap = MaxHeap.from_items(arr)
    for i in range(len(arr) - 1, -1, -1):
        arr[i] = heap.extract_max()


def heap_sort_by_insertion(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by inserting items one by one into a heap."""
    heap = MaxHeap(len(arr))
    for item in arr:
        heap.insert(item)
    for i in range(len(arr) - 1, -1, -1):
        arr[i] = heap.extract_max()