"""Identifier character classes and the calculator's reserved words."""

from __future__ import annotations

import string

from calcbench.symbol import SymType

_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")

_KEYWORDS = {
    "abs": SymType.ABS,
    "acos": SymType.ACOS,
    "asin": SymType.ASIN,
    "atan": SymType.ATAN,
    "cos": SymType.COS,
    "deg": SymType.DEG,
    "exit": SymType.QUIT,
    "exp": SymType.EXP,
    "halt": SymType.QUIT,
    "log": SymType.LOG,
    "quit": SymType.QUIT,
    "sin": SymType.SIN,
    "sqrt": SymType.SQRT,
    "store": SymType.STORE,
    "tan": SymType.TAN,
    "variables": SymType.VARIABLES,
}


def is_word_start(c: str) -> bool:
    """True if ``c`` is a single character that can begin an identifier."""
    return len(c) == 1 and c in _WORD_START


def is_word_char(c: str) -> bool:
    """True if ``c`` is a single character that can continue an identifier."""
    return len(c) == 1 and c in _WORD_CHARS


def keyword_type(word: str) -> SymType:
    """Return the symbol type of an identifier: a keyword's type, or VAR.

    Raises ValueError if ``word`` is not a well-formed identifier.
    """
    if not word or not is_word_start(word[0]) or not all(map(is_word_char, word)):
        raise ValueError(f"not an identifier: {word!r}")
    return _KEYWORDS.get(word, SymType.VAR)