"""Source locations, symbol types, symbols and syntax errors of the calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


@dataclass(frozen=True)
class Location:
    """A zero-based line number and column in the input."""

    linenumber: int = 0
    column: int = 0

    def __str__(self) -> str:
        # Shown one-based, the way people count lines and columns.
        return f"{self.linenumber + 1}/{self.column + 1}"


class SymType(Enum):
    """Kinds of symbols that the tokenizer produces."""

    WHITESPACE = auto()
    COMMENT = auto()

    COMMA = auto()
    LPAR = auto()
    RPAR = auto()
    SEMICOLON = auto()

    STORE = auto()
    VARIABLES = auto()
    QUIT = auto()

    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    DIV = auto()
    MOD = auto()
    POW = auto()

    FACT = auto()
    DEG = auto()

    SIN = auto()
    COS = auto()
    TAN = auto()
    EXP = auto()
    LOG = auto()

    ASIN = auto()
    ACOS = auto()
    ATAN = auto()

    SQRT = auto()
    ABS = auto()
    NUM = auto()
    VAR = auto()

    EOF = auto()
    FILEBAD = auto()
    GARBAGE = auto()

    def __str__(self) -> str:
        return self.name.lower()


Attribute = Optional[Union[float, str]]


@dataclass(frozen=True)
class Symbol:
    """A token: its type, where it starts, and an optional number or text."""

    tp: SymType
    loc: Location = Location()
    attribute: Attribute = None

    def get_double(self) -> float:
        """Return the numeric attribute; raise TypeError if there is none."""
        if not isinstance(self.attribute, float):
            raise TypeError(f"symbol {self.tp} has no double attribute")
        return self.attribute

    def get_string(self) -> str:
        """Return the text attribute; raise TypeError if there is none."""
        if not isinstance(self.attribute, str):
            raise TypeError(f"symbol {self.tp} has no string attribute")
        return self.attribute

    def __str__(self) -> str:
        head = f"symbol( {self.loc} : {self.tp}"
        if isinstance(self.attribute, float):
            return f"{head}, {self.attribute:g} )"
        if isinstance(self.attribute, str):
            return f"{head}, {self.attribute} )"
        return f"{head} )"


class CalcSyntaxError(Exception):
    """A syntax error at a given location in the input."""

    def __init__(self, explanation: str, loc: Location) -> None:
        super().__init__(explanation)
        self.explanation = explanation
        self.loc = loc

    def __str__(self) -> str:
        return f"{self.explanation} at location {self.loc}"