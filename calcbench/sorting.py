"""Sorting algorithms on lists of integers, plus helpers for benchmarking them."""

from __future__ import annotations

import random
from typing import List, MutableSequence, Optional, Sequence

RAND_MAX = 2**31 - 1


def format_vector(values: Sequence[int]) -> str:
    """Render ``values`` as ``{ a, b, c }``."""
    return "{ " + ", ".join(str(v) for v in values) + " }"


def random_vector(k: int, rng: Optional[random.Random] = None) -> List[int]:
    """Return ``k`` random integers between 0 and RAND_MAX inclusive."""
    source = rng if rng is not None else random
    return [source.randint(0, RAND_MAX) for _ in range(k)]


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent pairs."""
    if len(values) < 2:
        return
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(values) - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True


def _restore_heap(values: MutableSequence[int], size: int) -> None:
    """Sift the root down so that the first ``size`` items form a max-heap."""
    p = 0
    while 2 * p + 1 < size:
        left, right = 2 * p + 1, 2 * p + 2
        if right == size:
            if values[p] < values[left]:
                values[p], values[left] = values[left], values[p]
            return
        if values[p] >= values[left] and values[p] >= values[right]:
            return
        child = right if values[left] < values[right] else left
        values[p], values[child] = values[child], values[p]
        p = child


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with heapsort."""
    n = len(values)
    if n < 2:
        return
    for i in range(1, n):
        p = i
        while p != 0:
            parent = (p - 1) // 2
            if values[p] > values[parent]:
                values[p], values[parent] = values[parent], values[p]
            p = parent
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _restore_heap(values, end)


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place by moving the smallest remaining item forward."""
    n = len(values)
    for p in range(n):
        m = min(range(p, n), key=values.__getitem__)
        values[p], values[m] = values[m], values[p]


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with the library sort."""
    values[:] = sorted(values)