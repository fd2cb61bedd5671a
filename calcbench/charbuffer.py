"""A growable character buffer that tracks its own capacity."""

from __future__ import annotations

from typing import Iterator, List

_INITIAL_CAPACITY = 4
_GROWTH_FACTOR = 2


class CharBuffer:
    """A string built one character at a time, with explicit capacity growth."""

    def __init__(self) -> None:
        self._chars: List[str] = []
        self._capacity = 0

    def _ensure_capacity(self, needed: int) -> None:
        if self._capacity < needed:
            if self._capacity == 0:
                self._capacity = _INITIAL_CAPACITY
            else:
                self._capacity = needed * _GROWTH_FACTOR

    def push_back(self, c: str) -> None:
        """Append a single character."""
        if len(c) != 1:
            raise ValueError("push_back expects a single character")
        self._ensure_capacity(len(self._chars) + 1)
        self._chars.append(c)

    def push_str(self, s: str) -> None:
        """Append every character of ``s``."""
        for c in s:
            self.push_back(c)

    def pop_back(self) -> None:
        """Remove the last character."""
        if not self._chars:
            raise IndexError("pop_back from empty buffer")
        self._chars.pop()

    def clear(self) -> None:
        """Remove all characters; the capacity is kept."""
        self._chars.clear()

    def capacity(self) -> int:
        """Number of characters the buffer can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)