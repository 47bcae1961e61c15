"""Solutions to small contest problems."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence

RSA_P = 23333
RSA_Q = 10007
RSA_N = RSA_P * RSA_Q
RSA_PHI = (RSA_P - 1) * (RSA_Q - 1)


def min_fund_cost(weights: Sequence[int], edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the cheapest way to fund every node.

    Node ``i`` (1-based) can be funded directly at ``weights[i - 1]`` or linked to
    another node by an edge ``(a, b, cost)``; the answer is the weight of a minimum
    spanning tree over the nodes plus a virtual source node 0.
    """
    n = len(weights)
    adj: list[dict[int, int]] = [{} for _ in range(n + 1)]

    def link(a: int, b: int, cost: int) -> None:
        if cost < adj[a].get(b, cost + 1):
            adj[a][b] = cost
            adj[b][a] = cost

    for node, weight in enumerate(weights, start=1):
        link(0, node, weight)
    for a, b, cost in edges:
        if not (0 <= a <= n and 0 <= b <= n):
            raise ValueError(f"edge {a} {b} names a node outside 0..{n}")
        link(a, b, cost)

    visited = [False] * (n + 1)
    total = 0
    heap = [(0, 0)]
    while heap:
        cost, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += cost
        for other, weight in adj[node].items():
            if not visited[other]:
                heapq.heappush(heap, (weight, other))
    return total


def max_divisible_by_three(numbers: Iterable[int]) -> int:
    """Return the most items divisible by 3 obtainable by summing pairs or triples.

    Items already divisible count once; a residue-1 item pairs with a residue-2
    item, and three items of equal residue combine into one.
    """
    counts = [0, 0, 0]
    for number in numbers:
        counts[number % 3] += 1
    divisible, ones, twos = counts
    pairs = min(ones, twos)
    return divisible + pairs + abs(ones - twos) // 3


def min_tap_load(amounts: Iterable[int], taps: int) -> int:
    """Assign each amount to the least loaded tap and return the smallest final load plus one.

    Ties go to the tap with the lowest index.
    """
    if taps < 1:
        raise ValueError(f"need at least one tap: {taps}")
    loads = [(0, index) for index in range(taps)]
    for amount in amounts:
        load, index = loads[0]
        heapq.heapreplace(loads, (load + amount, index))
    return min(load for load, _ in loads) + 1


def _bezout_coefficient(e: int, modulus: int) -> int:
    old_r, r = e, modulus
    old_s, s = 1, 0
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
    return old_s


def rsa_decrypt(e: int, c: int) -> int:
    """Decrypt ``c`` under the fixed key p=23333, q=10007 with public exponent ``e``."""
    d = _bezout_coefficient(e, RSA_PHI)
    if d < 0:
        d += RSA_PHI
    return pow(c, d, RSA_N)


def find_min_abs(arr: Sequence[int]) -> int:
    """Return the item of smallest absolute value in a sorted sequence without duplicates.

    On a tie between a negative and a positive item the negative one is returned.
    """
    if not arr:
        raise ValueError("sequence is empty")
    if len(arr) == 1 or arr[0] >= 0:
        return arr[0]
    if arr[-1] <= 0:
        return arr[-1]
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if arr[mid] == 0:
            return arr[mid]
        if arr[mid] > 0:
            right = mid - 1
        else:
            left = mid + 1
    if abs(arr[left]) < abs(arr[right]):
        return arr[left]
    return arr[right]