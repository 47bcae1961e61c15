"""Array generators, word reading and timing helpers for the algorithm modules."""

from __future__ import annotations

import random
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, MutableSequence, Sequence

_WORD = re.compile(r"[A-Za-z]+")


def generate_random_array(n: int, range_l: int, range_r: int) -> list[int]:
    """Return ``n`` random integers drawn from ``[range_l, range_r]``."""
    if range_l > range_r:
        raise ValueError(f"empty range: {range_l} > {range_r}")
    return [random.randint(range_l, range_r) for _ in range(n)]


def generate_ordered_array(n: int) -> list[int]:
    """Return ``[0, 1, ..., n - 1]``."""
    return list(range(n))


def generate_nearly_ordered_array(n: int, swap_times: int) -> list[int]:
    """Return an ordered array of ``n`` items disturbed by ``swap_times`` random swaps."""
    arr = list(range(n))
    if n == 0:
        return arr
    for _ in range(swap_times):
        x = random.randrange(n)
        y = random.randrange(n)
        arr[x], arr[y] = arr[y], arr[x]
    return arr


def copy_array(arr: Iterable[Any]) -> list[Any]:
    """Return an independent shallow copy of ``arr``."""
    return list(arr)


def is_sorted(arr: Sequence[Any]) -> bool:
    """Return True if ``arr`` is in non-decreasing order."""
    return all(not (a > b) for a, b in zip(arr, arr[1:]))


def split_words(text: str) -> list[str]:
    """Split ``text`` into lower-cased runs of ASCII letters."""
    return [word.lower() for word in _WORD.findall(text)]


def read_words(filename: str | Path) -> list[str]:
    """Read a text file and return its words, lower-cased."""
    with open(filename, encoding="utf-8", errors="replace") as handle:
        return split_words(handle.read())


def format_array(arr: Iterable[Any]) -> str:
    """Render the items of ``arr`` separated by single spaces."""
    return " ".join(str(item) for item in arr)


@dataclass(frozen=True)
class TimingReport:
    """The outcome of one timed run."""

    name: str
    seconds: float
    details: dict[str, Any] = field(default_factory=dict)
    result: Any = None

    def __str__(self) -> str:
        lines = [
            f"\n♻️ {self.name} ♻️",
            "───────|───────",
            f"{'speed'.ljust(7)}│ {self.seconds}s",
        ]
        lines.extend(f"{label.ljust(7)}│ {value}" for label, value in self.details.items())
        return "\n".join(lines)


def benchmark_sort(
    name: str, sort: Callable[[MutableSequence[Any]], Any], arr: MutableSequence[Any]
) -> TimingReport:
    """Sort ``arr`` in place with ``sort``, check the result and time it."""
    start = time.process_time()
    sort(arr)
    elapsed = time.process_time() - start
    if not is_sorted(arr):
        raise ValueError(f"{name} left the array unsorted")
    return TimingReport(name, elapsed, {"num": len(arr)})


def benchmark_search(
    name: str, search: Callable[[Sequence[Any], Any], bool], arr: Sequence[Any], needle: Any
) -> TimingReport:
    """Time ``search(arr, needle)`` and record what it found."""
    start = time.process_time()
    found = search(arr, needle)
    elapsed = time.process_time() - start
    return TimingReport(name, elapsed, {"searched": int(bool(found)), "needle": needle}, found)


def benchmark_union_find(name: str, uf: Any, n: int) -> TimingReport:
    """Run ``n`` random unions then ``n`` random connectivity queries on ``uf``."""
    start = time.process_time()
    for _ in range(n):
        uf.union(random.randrange(n), random.randrange(n))
    for _ in range(n):
        uf.is_connected(random.randrange(n), random.randrange(n))
    elapsed = time.process_time() - start
    return TimingReport(name, elapsed)


def benchmark_word_count(
    name: str, table_factory: Callable[[], Any], filename: str | Path, needle: str
) -> TimingReport:
    """Count the words of a file in a fresh symbol table and report the count of ``needle``."""
    words = read_words(filename)
    start = time.process_time()
    table = table_factory()
    for word in words:
        seen = table.search(word)
        table.insert(word, 1 if seen is None else seen + 1)
    elapsed = time.process_time() - start
    count = table.search(needle)
    return TimingReport(name, elapsed, {"needle": needle, "num": count}, count)