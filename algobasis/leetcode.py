"""Solutions to a few classic interview problems."""

from __future__ import annotations

from functools import lru_cache
from typing import MutableSequence


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced.

    Only the space character separates words; leading, trailing and repeated
    spaces are dropped.
    """
    return " ".join(reversed([word for word in s.split(" ") if word]))


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero in ``nums`` to the end, keeping the other items in order."""
    nonzero = [x for x in nums if x != 0]
    zeros = [x for x in nums if x == 0]
    nums[:] = nonzero + zeros


def super_egg_drop(k: int, n: int) -> int:
    """Return the fewest moves that find the critical floor with ``k`` eggs and ``n`` floors.

    Memoised recursion with a binary search over the floor to drop from.
    """
    if k < 1:
        raise ValueError(f"need at least one egg: {k}")
    if n < 0:
        raise ValueError(f"floor count must not be negative: {n}")

    @lru_cache(maxsize=None)
    def drops(eggs: int, floors: int) -> int:
        if floors == 0:
            return 0
        if eggs == 1:
            return floors
        lo, hi = 1, floors
        while lo + 1 < hi:
            x = (lo + hi) // 2
            broken = drops(eggs - 1, x - 1)
            whole = drops(eggs, floors - x)
            if broken < whole:
                lo = x
            elif broken > whole:
                hi = x
            else:
                lo = hi = x
        return 1 + min(
            max(drops(eggs - 1, lo - 1), drops(eggs, floors - lo)),
            max(drops(eggs - 1, hi - 1), drops(eggs, floors - hi)),
        )

    return drops(k, n)


def super_egg_drop_dp(k: int, n: int) -> int:
    """Return the same answer as :func:`super_egg_drop` by counting floors per move.

    After ``m`` moves with ``j`` eggs one can cover ``1 + f(m-1, j-1) + f(m-1, j)``
    floors; the answer is the first ``m`` covering ``n``.
    """
    if k < 1:
        raise ValueError(f"need at least one egg: {k}")
    if n < 1:
        raise ValueError(f"need at least one floor: {n}")
    row = [0] + [1] * k
    moves = 1
    while row[k] < n:
        moves += 1
        row = [0] + [1 + fewer + same for fewer, same in zip(row, row[1:])]
    return moves