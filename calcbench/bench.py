"""Timing runs for the sorting algorithms and the character buffer."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, List, MutableSequence, Optional, Sequence, TextIO, Tuple

from calcbench.charbuffer import CharBuffer
from calcbench.sorting import (
    bubble_sort,
    format_vector,
    heap_sort,
    insertion_sort,
    quick_sort,
    random_vector,
)
from calcbench.timetable import Timer, TimeTable

_SORTS: Tuple[Tuple[str, Callable[[MutableSequence[int]], None]], ...] = (
    ("heapsort", heap_sort),
    ("quicksort from library", quick_sort),
    ("bubblesort", bubble_sort),
    ("insertion sort", insertion_sort),
)

STRING_TABLE_NAME = "string with multiplying/adding ensure_capacity"


def _doubling(start: int, limit: int) -> List[int]:
    sizes = []
    s = start
    while s < limit:
        sizes.append(s)
        s *= 2
    return sizes


def measure_sorts(
    sizes: Iterable[int],
    vector_length: Optional[int] = None,
    out: Optional[TextIO] = None,
) -> List[TimeTable]:
    """Time every sort on a random vector for each size.

    The vector has ``vector_length`` items, or as many as the size when that
    is None. Each sorted vector is written to ``out`` when it is given.
    Returns one table per algorithm: heapsort, library quicksort, bubblesort
    and insertion sort.
    """
    tables = [TimeTable(name) for name, _ in _SORTS]
    for size in sizes:
        test = random_vector(size if vector_length is None else vector_length)
        for table, (_, sort) in zip(tables, _SORTS):
            values = list(test)
            timer = Timer()
            sort(values)
            table.insert(size, timer.time())
            if out is not None:
                out.write(format_vector(values) + "\n")
    return tables


def measure_string(sizes: Iterable[int]) -> TimeTable:
    """Time filling a CharBuffer with each number of characters and emptying it."""
    table = TimeTable(STRING_TABLE_NAME)
    for size in sizes:
        timer = Timer()
        buf = CharBuffer()
        for i in range(size):
            buf.push_back(chr(ord("a") + i % 26))
        while buf:
            buf.pop_back()
        table.insert(size, timer.time())
    return table


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="calcbench-bench",
        description="Measure run times of sorting and string building.",
    )
    parser.add_argument(
        "--sorts", action="store_true", help="also measure the sorting algorithms"
    )
    parser.add_argument(
        "--sort-start", type=int, default=2000, help="smallest input size for sorting"
    )
    parser.add_argument(
        "--string-start",
        type=int,
        default=1000000,
        help="smallest number of characters for the string test",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmarks and print their tables."""
    args = _parse(argv)
    out = sys.stdout

    if args.sorts:
        tables = measure_sorts(_doubling(args.sort_start, 100 * args.sort_start), out=out)
        for table in tables:
            out.write(f"{table}\n")
        total = sum(table.totaltime() for table in tables)
        out.write(f"this is the total time: {total:.4e}\n")

    out.write("\n")
    out.write("measuring performance of string operations\n")
    start = args.string_start
    out.write(f"{measure_string(_doubling(start, 32 * start))}\n")
    return 0