"""A stopwatch and a table of run times per input size."""

from __future__ import annotations

import time
from typing import Dict, Iterator, Tuple


class Timer:
    """Measures seconds elapsed since creation or the last reset."""

    def __init__(self) -> None:
        self._t0 = time.perf_counter()

    def reset(self) -> None:
        """Start measuring again from now."""
        self._t0 = time.perf_counter()

    def time(self) -> float:
        """Seconds since creation or the last reset; does not reset."""
        return time.perf_counter() - self._t0


class TimeTable:
    """Maps input sizes to run times for one named algorithm."""

    def __init__(self, algname: str) -> None:
        self.algname = algname
        self._times: Dict[int, float] = {}

    def insert(self, inputsize: int, runtime: float) -> None:
        """Record ``runtime`` for ``inputsize``, replacing any earlier entry."""
        self._times[inputsize] = runtime

    def __len__(self) -> int:
        return len(self._times)

    def clear(self) -> None:
        """Remove all entries."""
        self._times.clear()

    def totaltime(self) -> float:
        """Sum of all recorded run times."""
        return sum(runtime for _, runtime in self)

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        """Yield (inputsize, runtime) pairs in order of input size."""
        return iter(sorted(self._times.items()))

    def __str__(self) -> str:
        parts = [
            f"Performance table of {self.algname}",
            " (inputsize/runtime in seconds):\n",
        ]
        parts.extend(f"     {size}/{runtime:.4e}" for size, runtime in self)
        parts.append("\n")
        return "".join(parts)