"""Disjoint-set forests: union by rank, with path compression, and union by size."""

from __future__ import annotations


class UnionFindRank:
    """Union-find over ``0..count-1`` that links the shallower tree under the deeper one."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        self._parent = list(range(count))
        self._rank = [1] * count

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, p: int) -> None:
        if not 0 <= p < len(self._parent):
            raise IndexError(f"element {p} out of range 0..{len(self._parent) - 1}")

    def find(self, p: int) -> int:
        """Return the root of the set holding ``p``."""
        self._check(p)
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        """Return True if ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        p_root = self.find(p)
        q_root = self.find(q)
        if p_root == q_root:
            return
        rank = self._rank
        if rank[p_root] < rank[q_root]:
            self._parent[p_root] = q_root
        elif rank[q_root] < rank[p_root]:
            self._parent[q_root] = p_root
        else:
            self._parent[p_root] = q_root
            rank[q_root] += 1


class UnionFindPathCompression(UnionFindRank):
    """Union by rank that also halves paths while finding roots."""

    def find(self, p: int) -> int:
        """Return the root of the set holding ``p``, shortening the path on the way."""
        self._check(p)
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p


class UnionFindSize:
    """Union-find over ``0..count-1`` that links the smaller set under the larger one."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        self._parent = list(range(count))
        self._size = [1] * count

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, p: int) -> int:
        """Return the root of the set holding ``p``."""
        if not 0 <= p < len(self._parent):
            raise IndexError(f"element {p} out of range 0..{len(self._parent) - 1}")
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def is_connected(self, p: int, q: int) -> bool:
        """Return True if ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        p_root = self.find(p)
        q_root = self.find(q)
        if p_root == q_root:
            return
        size = self._size
        if size[p_root] < size[q_root]:
            self._parent[p_root] = q_root
            size[q_root] += size[p_root]
        else:
            self._parent[q_root] = p_root
            size[p_root] += size[q_root]