"""Binary search over sorted sequences."""

from __future__ import annotations

from typing import Any, Sequence


def iterative_search(haystack: Sequence[Any], needle: Any) -> bool:
    """Return True if ``needle`` occurs in the sorted ``haystack``."""
    left, right = 0, len(haystack) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if haystack[mid] == needle:
            return True
        if haystack[mid] > needle:
            right = mid - 1
        else:
            left = mid + 1
    return False


def _recursive_search(haystack: Sequence[Any], needle: Any, left: int, right: int) -> bool:
    if left > right:
        return False
    mid = left + (right - left) // 2
    if haystack[mid] == needle:
        return True
    if haystack[mid] > needle:
        return _recursive_search(haystack, needle, left, mid - 1)
    return _recursive_search(haystack, needle, mid + 1, right)


def recursive_search(haystack: Sequence[Any], needle: Any) -> bool:
    """Return True if ``needle`` occurs in the sorted ``haystack``, by recursion."""
    return _recursive_search(haystack, needle, 0, len(haystack) - 1)