"""A one-symbol look-ahead tokenizer for the calculator language."""

from __future__ import annotations

import re
from typing import Iterator, Optional

from calcbench.dfa import classify
from calcbench.filereader import FileReader
from calcbench.symbol import Location, Symbol, SymType

_UNREADABLE = frozenset({SymType.EOF, SymType.FILEBAD})
_SKIPPED = frozenset({SymType.WHITESPACE, SymType.COMMENT})
_WITH_TEXT = frozenset({SymType.VAR, SymType.GARBAGE})
_FINAL = frozenset({SymType.EOF, SymType.QUIT, SymType.FILEBAD})

_NUMBER_PREFIX = re.compile(r"[+-]?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?")


def _to_double(text: str) -> float:
    """Convert the longest numeric prefix of ``text`` to a float."""
    try:
        return float(text)
    except ValueError:
        match = _NUMBER_PREFIX.match(text)
        if match is None:
            raise
        return float(match.group())


class Tokenizer:
    """Turns the characters of a FileReader into symbols, one at a time."""

    def __init__(self, source: FileReader) -> None:
        self._source = source
        self._lookahead: Optional[Symbol] = None

    def consume(self) -> None:
        """Drop the current symbol so that the next call reads a new one.

        Raises RuntimeError when the current symbol is end-of-file or a
        read failure, since nothing can be read beyond it.
        """
        if self._lookahead is not None and self._lookahead.tp in _UNREADABLE:
            raise RuntimeError("cannot clear when file is not readable")
        self._lookahead = None

    def current(self) -> Symbol:
        """Return the current symbol, reading it from the source if needed."""
        if self._lookahead is None:
            self._lookahead = self._read()
        return self._lookahead

    def _read(self) -> Symbol:
        source = self._source
        while True:
            start = Location(source.line, source.column)
            if not source.has(1):
                return Symbol(SymType.EOF, start)
            if not source.good():
                return Symbol(SymType.FILEBAD, start)

            tp, length = classify(source)
            if tp in _SKIPPED:
                source.commit(length)
                continue

            if tp is SymType.NUM:
                value = _to_double(source.view(length))
                source.commit(length)
                return Symbol(tp, start, value)

            if tp in _WITH_TEXT:
                length = max(length, 1)
                text = source.view(length)
                source.commit(length)
                return Symbol(tp, start, text)

            source.commit(length)
            return Symbol(tp, start)

    def tokens(self) -> Iterator[Symbol]:
        """Yield symbols up to and including end-of-file, quit or a read failure."""
        while True:
            sym = self.current()
            yield sym
            if sym.tp in _FINAL:
                return
            self.consume()

    def __str__(self) -> str:
        text = f"Source\n   {self._source}"
        if self._lookahead is not None:
            return f"{text}   lookahead = {self._lookahead}"
        return f"{text}   (no lookahead)"