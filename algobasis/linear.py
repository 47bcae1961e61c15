"""A bounded sequential list with 1-based positions, and digit-list addition."""

from __future__ import annotations

from itertools import chain, zip_longest
from typing import Any, Iterable, Iterator, Sequence

LIST_SIZE = 100


class SeqList:
    """A list of at most ``capacity`` items addressed by 1-based positions."""

    def __init__(self, capacity: int = LIST_SIZE) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def get(self, i: int) -> Any:
        """Return the item at position ``i`` (1-based)."""
        if not 1 <= i <= len(self._items):
            raise IndexError(f"position {i} out of range 1..{len(self._items)}")
        return self._items[i - 1]

    def locate(self, e: Any) -> int:
        """Return the 1-based position of the first item equal to ``e``, or 0."""
        return next((pos for pos, item in enumerate(self._items, start=1) if item == e), 0)

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it ends up at position ``i`` (1-based)."""
        if not 1 <= i <= len(self._items) + 1:
            raise IndexError(f"insert position {i} is invalid")
        if len(self._items) >= self.capacity:
            raise OverflowError("list is full, cannot insert")
        self._items.insert(i - 1, e)

    def delete(self, i: int) -> Any:
        """Remove and return the item at position ``i`` (1-based)."""
        if not self._items:
            raise IndexError("list is empty, cannot delete")
        if not 1 <= i <= len(self._items):
            raise IndexError(f"delete position {i} is invalid")
        return self._items.pop(i - 1)


def union_into(a: SeqList, b: Iterable[Any]) -> None:
    """Append to ``a`` every item of ``b`` that ``a`` does not already hold."""
    for item in b:
        if not a.locate(item):
            a.insert(len(a) + 1, item)


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two non-negative integers given as digit lists, most significant first."""
    for digit in chain(a, b):
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result