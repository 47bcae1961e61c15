"""A symbol table kept as an unordered singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    next: Optional[_Node] = None


class SequenceST:
    """A linear-search symbol table; new keys go to the front."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        """Return True if the table holds no keys."""
        return self._count == 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, key: Any) -> _Node | None:
        return next((node for node in self._nodes() if node.key == key), None)

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, replacing the value of an existing key."""
        node = self._find(key)
        if node is not None:
            node.value = value
            return
        self._head = _Node(key, value, self._head)
        self._count += 1

    def contains(self, key: Any) -> bool:
        """Return True if ``key`` is in the table."""
        return self._find(key) is not None

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node = self._find(key)
        return None if node is None else node.value

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.key == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._count -= 1
                return
            previous = node