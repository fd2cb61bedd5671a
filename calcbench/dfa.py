"""Longest-match classification of the next symbol in a character source."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from calcbench.keywords import is_word_char, is_word_start, keyword_type
from calcbench.symbol import SymType


class _Source(Protocol):
    def has(self, length: int) -> bool: ...

    def peek(self, index: int) -> str: ...

    def view(self, length: int) -> str: ...


_WHITESPACE = frozenset("\t\n\r ")

_SINGLE = {
    "!": SymType.FACT,
    "#": SymType.EOF,
    "%": SymType.MOD,
    "(": SymType.LPAR,
    ")": SymType.RPAR,
    "*": SymType.TIMES,
    "+": SymType.PLUS,
    ",": SymType.COMMA,
    ";": SymType.SEMICOLON,
    "^": SymType.POW,
}

_MAX_EXPONENT_DIGITS = 3


def _char(source: _Source, index: int) -> Optional[str]:
    """The character at ``index``, or None if the source has no more."""
    if not source.has(index + 1):
        return None
    return source.peek(index)


def _is_digit(c: Optional[str]) -> bool:
    return c is not None and "0" <= c <= "9"


def _span(source: _Source, start: int, accept: Callable[[str], bool]) -> int:
    """Index just past the run of accepted characters beginning at ``start``."""
    i = start
    while (c := _char(source, i)) is not None and accept(c):
        i += 1
    return i


def _number(source: _Source, start: int) -> int:
    """End of a number whose first digit is at ``start``."""
    if _char(source, start) == "0":
        i = start + 1
    else:
        i = _span(source, start, _is_digit)

    c = _char(source, i)
    if c == ".":
        i = _span(source, i + 1, _is_digit)
        c = _char(source, i)

    if c in ("e", "E"):
        i += 1
        if _char(source, i) in ("+", "-"):
            i += 1
        for _ in range(_MAX_EXPONENT_DIGITS):
            if not _is_digit(_char(source, i)):
                break
            i += 1
    return i


def _slash(source: _Source) -> tuple[SymType, int]:
    """A division sign, or a block or line comment starting with '/'."""
    follow = _char(source, 1)
    i = 2
    if follow == "*":
        after_star = False
        while (c := _char(source, i)) is not None:
            i += 1
            if after_star and c == "/":
                return SymType.COMMENT, i
            after_star = c == "*"
    elif follow == "/":
        while (c := _char(source, i)) is not None:
            i += 1
            if c == "\n":
                return SymType.COMMENT, i
    # Unterminated comments fall back to the division sign alone.
    return SymType.DIV, 1


def classify(source: _Source) -> tuple[SymType, int]:
    """Classify the longest symbol at the front of ``source``.

    Returns the symbol type and its length in characters. Nothing is
    committed. Unrecognised input, and an empty source, give
    ``(SymType.GARBAGE, 0)``.
    """
    c = _char(source, 0)
    if c is None:
        return SymType.GARBAGE, 0

    if c in _WHITESPACE:
        return SymType.WHITESPACE, _span(source, 1, _WHITESPACE.__contains__)

    if c in _SINGLE:
        return _SINGLE[c], 1

    if c == "-":
        if _is_digit(_char(source, 1)):
            return SymType.NUM, _number(source, 1)
        return SymType.MINUS, 1

    if c == "/":
        return _slash(source)

    if _is_digit(c):
        return SymType.NUM, _number(source, 0)

    if is_word_start(c):
        end = _span(source, 1, is_word_char)
        return keyword_type(source.view(end)), end

    return SymType.GARBAGE, 0