"""Command-line benchmarks for the sorting and searching routines."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Mapping, MutableSequence, Sequence

from algobasis.heap import heap_sort, heap_sort_by_insertion
from algobasis.search import iterative_search, recursive_search
from algobasis.sorting import (
    bubble_sort,
    insertion_sort,
    insertion_sort_improved,
    merge_sort,
    merge_sort_bottom_up,
    quick_sort,
    quick_sort_3way,
    quick_sort_insertion,
    quick_sort_random,
    quick_sort_random_2way,
    selection_sort,
    shell_sort,
)
from algobasis.tools import (
    TimingReport,
    benchmark_search,
    benchmark_sort,
    copy_array,
    generate_nearly_ordered_array,
    generate_ordered_array,
    generate_random_array,
)

SortFunction = Callable[[MutableSequence[Any]], Any]

QUADRATIC_SORTS: dict[str, SortFunction] = {
    "BubbleSort": bubble_sort,
    "SelectionSort": selection_sort,
    "InsertionSort": insertion_sort,
    "InsertionSortImprove": insertion_sort_improved,
}

FAST_SORTS: dict[str, SortFunction] = {
    "Shell sort": shell_sort,
    "MergeSort asc sort": merge_sort,
    "MergeSort asc sort bottom up": merge_sort_bottom_up,
    "Quick sort": quick_sort,
    "Quick sort improve 3way": quick_sort_3way,
    "Quick sort improve insertion": quick_sort_insertion,
    "Quick sort improve random": quick_sort_random,
    "Quick sort improve v2": quick_sort_random_2way,
    "Heap Sort": heap_sort,
    "Heap Sort Improve": heap_sort_by_insertion,
}

SUITES: dict[str, dict[str, SortFunction]] = {
    "quadratic": QUADRATIC_SORTS,
    "fast": FAST_SORTS,
}


def run_sort_benchmarks(
    n: int, sorts: Mapping[str, SortFunction]
) -> dict[str, list[TimingReport]]:
    """Time each sort on copies of a random and a nearly ordered array of ``n`` items."""
    inputs = {
        "random": generate_random_array(n, 0, n),
        "nearly ordered": generate_nearly_ordered_array(n, n // 16),
    }
    return {
        label: [benchmark_sort(name, sort, copy_array(base)) for name, sort in sorts.items()]
        for label, base in inputs.items()
    }


def run_search_benchmarks(length: int, needle: int) -> list[TimingReport]:
    """Time both binary searches for ``needle`` in ``[0, length)``."""
    haystack: Sequence[int] = generate_ordered_array(length)
    return [
        benchmark_search("iterativeSearch", iterative_search, haystack, needle),
        benchmark_search("recursiveSearch", recursive_search, haystack, needle),
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algobasis-bench", description="Time the sorting and searching routines."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort_cmd = commands.add_parser("sort", help="benchmark sorting algorithms")
    sort_cmd.add_argument("-n", "--size", type=int, default=2**16, help="array length")
    sort_cmd.add_argument("--suite", choices=sorted(SUITES), default="quadratic")

    search_cmd = commands.add_parser("search", help="benchmark binary search")
    search_cmd.add_argument("--length", type=int, default=10_000_000)
    search_cmd.add_argument("--needle", type=int, default=777)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark named on the command line and print the timings."""
    args = _parser().parse_args(argv)
    if args.command == "sort":
        results = run_sort_benchmarks(args.size, SUITES[args.suite])
        for label, reports in results.items():
            print(f"\n === {label} array === \n")
            for report in reports:
                print(f"{report.name} │ {report.seconds}s")
    else:
        for report in run_search_benchmarks(args.length, args.needle):
            print(
                f"{report.name} : {report.seconds} s "
                f"[searched: {report.details['searched']}] "
                f"[needle: {report.details['needle']}]"
            )
    return 0