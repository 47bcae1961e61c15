"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """A symbol table kept as a binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return self._count == 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, replacing the value of an existing key."""
        if self._root is None:
            self._root = _Node(key, value)
            self._count += 1
            return
        node = self._root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    self._count += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, value)
                    self._count += 1
                    return
                node = node.right

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def contains(self, key: Any) -> bool:
        """Return True if ``key`` is in the tree."""
        return self._find(key) is not None

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node = self._find(key)
        return None if node is None else node.value

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1

    def min_item(self) -> tuple[Any, Any]:
        """Return the (key, value) pair with the smallest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key, node.value

    def max_item(self) -> tuple[Any, Any]:
        """Return the (key, value) pair with the largest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key, node.value

    def remove_min(self) -> tuple[Any, Any]:
        """Remove and return the pair with the smallest key."""
        item = self.min_item()
        self.remove(item[0])
        return item

    def remove_max(self) -> tuple[Any, Any]:
        """Remove and return the pair with the largest key."""
        item = self.max_item()
        self.remove(item[0])
        return item

    def pre_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs node first, then left and right subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key, node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def post_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs subtrees first, then the node."""
        stack = [self._root] if self._root is not None else []
        visited: list[_Node] = []
        while stack:
            node = stack.pop()
            visited.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        for node in reversed(visited):
            yield node.key, node.value

    def level_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs breadth first."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.key, node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)