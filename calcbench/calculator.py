"""An interactive calculator reading semicolon-terminated commands."""

from __future__ import annotations

import math
import operator
import sys
from typing import Callable, Dict, Mapping, Optional, Sequence, TextIO

from calcbench.filereader import FileReader
from calcbench.symbol import CalcSyntaxError, SymType
from calcbench.tokenizer import Tokenizer

E = 2.7182818284590452353602874713526
PI = 3.141592653589793238462643383279

_CLOSE = 1.0e-8


class EvaluationError(Exception):
    """An expression could not be evaluated."""


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_variables(variables: Mapping[str, float]) -> str:
    """Render the variables, sorted by name, the way the 'variables' command shows them."""
    lines = ["Variables:\n"]
    lines.extend(
        f"      {name}   =   {_fmt(value)}\n" for name, value in sorted(variables.items())
    )
    return "".join(lines)


def next_semicolon(tokens: Tokenizer) -> None:
    """Skip input up to and including the next semicolon, stopping at end-of-file."""
    while tokens.current().tp not in (SymType.SEMICOLON, SymType.EOF):
        tokens.consume()
    if tokens.current().tp is not SymType.EOF:
        tokens.consume()


def factorial(n: int) -> float:
    """Return n! as a float; negative counts wrap around as unsigned 32-bit values."""
    n &= 0xFFFFFFFF
    result = 1.0
    for i in range(2, n + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def make_int(d: float) -> int:
    """Round ``d`` to an int, raising EvaluationError if it is not close to one."""
    if not math.isfinite(d):
        raise EvaluationError("d is not close to an int")
    rounded = math.floor(abs(d) + 0.5)
    if d < 0:
        rounded = -rounded
    if abs(d - rounded) >= _CLOSE:
        raise EvaluationError("d is not close to an int")
    return rounded


def _is_odd_integer(y: float) -> bool:
    return y.is_integer() and y % 2 == 1


def _pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


def _safe(fn: Callable[..., float], *args: float) -> float:
    try:
        return fn(*args)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _div(x: float, y: float) -> float:
    if y == 0:
        raise EvaluationError("division by zero")
    return x / y


def _mod(x: float, y: float) -> float:
    if y == 0:
        raise EvaluationError("modulo by zero")
    return _safe(math.fmod, x, y)


def _sqrt(x: float) -> float:
    if x < 0:
        raise EvaluationError("sqrt arg cannot be < 0")
    return math.sqrt(x)


def _asin(x: float) -> float:
    if x < -1 or x > 1:
        raise EvaluationError("asin arg out of [-1,1] range")
    return math.asin(x)


def _acos(x: float) -> float:
    if x < -1 or x > 1:
        raise EvaluationError("acos arg out of [-1,1] range")
    return math.acos(x)


def _log(x: float) -> float:
    if x <= 0:
        raise EvaluationError("log arg cannot be <= 0")
    return math.log(x)


_BINARY: Dict[SymType, tuple] = {
    SymType.PLUS: ("addition", operator.add),
    SymType.MINUS: ("substraction", operator.sub),
    SymType.TIMES: ("multiplication", operator.mul),
    SymType.DIV: ("division", _div),
    SymType.MOD: ("modulo", _mod),
    SymType.POW: ("power", _pow),
}

_UNARY: Dict[SymType, Callable[[float], float]] = {
    SymType.SQRT: _sqrt,
    SymType.ABS: math.fabs,
    SymType.SIN: lambda x: _safe(math.sin, x),
    SymType.COS: lambda x: _safe(math.cos, x),
    SymType.TAN: lambda x: _safe(math.tan, x),
    SymType.ASIN: _asin,
    SymType.ACOS: _acos,
    SymType.ATAN: math.atan,
    SymType.LOG: _log,
    SymType.EXP: lambda x: _safe(math.exp, x),
}

_FUNCTIONS = frozenset(_UNARY)


def apply(tp: SymType, args: Sequence[float]) -> float:
    """Apply the operator or function ``tp`` to ``args``."""
    values = [float(a) for a in args]
    if tp in _BINARY:
        name, fn = _BINARY[tp]
        if len(values) != 2:
            raise EvaluationError(f"{name} needs 2 args")
        return fn(*values)
    if tp in _UNARY:
        if len(values) != 1:
            raise EvaluationError(f"{tp} needs 1 arg")
        return _UNARY[tp](values[0])
    raise EvaluationError("no such function")


def eval_sum(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate a sequence of products joined by '+' and '-'."""
    result = eval_product(tokens, variables)
    while (tp := tokens.current().tp) in (SymType.PLUS, SymType.MINUS):
        tokens.consume()
        result = apply(tp, [result, eval_product(tokens, variables)])
    return result


def eval_product(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate a sequence of prefix terms joined by '*', '/' and '%'."""
    result = eval_prefix(tokens, variables)
    while (tp := tokens.current().tp) in (SymType.TIMES, SymType.DIV, SymType.MOD):
        tokens.consume()
        result = apply(tp, [result, eval_prefix(tokens, variables)])
    return result


def eval_prefix(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate unary signs and the 'deg' prefix (radians to degrees)."""
    sign = 1
    while True:
        tp = tokens.current().tp
        if tp is SymType.MINUS:
            tokens.consume()
            sign = -sign
        elif tp is SymType.PLUS:
            tokens.consume()
        elif tp is SymType.DEG:
            tokens.consume()
            return eval_prefix(tokens, variables) * 180.0 / PI
        else:
            break
    return sign * eval_postfix(tokens, variables)


def eval_postfix(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate postfix '!' and 'deg' (degrees to radians)."""
    result = eval_pow(tokens, variables)
    while True:
        tp = tokens.current().tp
        if tp is SymType.FACT:
            tokens.consume()
            result = factorial(make_int(result))
        elif tp is SymType.DEG:
            tokens.consume()
            result = result * PI / 180.0
        else:
            return result


def eval_pow(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate right-associative exponentiation."""
    result = eval_function(tokens, variables)
    if tokens.current().tp is SymType.POW:
        tokens.consume()
        exponent = eval_pow(tokens, variables)
        result = apply(SymType.POW, [result, exponent])
    return result


def eval_function(tokens: Tokenizer, variables: Mapping[str, float]) -> float:
    """Evaluate a number, variable, parenthesised sum or function call."""
    sym = tokens.current()

    if sym.tp is SymType.NUM:
        value = sym.get_double()
        tokens.consume()
        return value

    if sym.tp is SymType.VAR:
        name = sym.get_string()
        tokens.consume()
        if name not in variables:
            raise EvaluationError(f"unknown variable {name}")
        return variables[name]

    if sym.tp is SymType.LPAR:
        tokens.consume()
        result = eval_sum(tokens, variables)
        if tokens.current().tp is not SymType.RPAR:
            raise CalcSyntaxError("expected ')'", tokens.current().loc)
        tokens.consume()
        return result

    if sym.tp in _FUNCTIONS:
        function = sym.tp
        tokens.consume()
        if tokens.current().tp is not SymType.LPAR:
            raise CalcSyntaxError("expected '(' after function ", tokens.current().loc)
        tokens.consume()

        args = []
        if tokens.current().tp is not SymType.RPAR:
            while True:
                args.append(eval_sum(tokens, variables))
                if tokens.current().tp is not SymType.COMMA:
                    break
                tokens.consume()

        if tokens.current().tp is not SymType.RPAR:
            raise CalcSyntaxError("missing ')' after function ", tokens.current().loc)
        tokens.consume()
        return apply(function, args)

    raise CalcSyntaxError("syntax error", sym.loc)


def run(stream: TextIO, out: TextIO) -> int:
    """Run the calculator on ``stream``, writing to ``out``; return the exit status."""
    tokens = Tokenizer(FileReader(stream, "stdin"))
    variables: Dict[str, float] = {"e": E, "pi": PI}
    result: Optional[float] = None

    while True:
        try:
            out.write(":- ")
            out.flush()

            sym = tokens.current()
            if sym.tp is SymType.VARIABLES:
                tokens.consume()
                out.write(format_variables(variables))
            elif sym.tp in (SymType.EOF, SymType.QUIT):
                out.write("quitting\n")
                return 0
            elif sym.tp is SymType.STORE:
                tokens.consume()
                target = tokens.current()
                if target.tp is not SymType.VAR:
                    raise CalcSyntaxError("expected a variable", target.loc)
                name = target.get_string()
                tokens.consume()
                if result is None:
                    out.write("no result to store\n")
                else:
                    out.write(f"stored {_fmt(result)} in {name}\n")
                    variables[name] = result
            else:
                result = eval_sum(tokens, variables)
                out.write(f"result: {_fmt(result)}\n")

            if tokens.current().tp is not SymType.SEMICOLON:
                raise CalcSyntaxError("semicolon expected", tokens.current().loc)
            tokens.consume()

        except (CalcSyntaxError, EvaluationError) as error:
            out.write(f"{error}\n")
            next_semicolon(tokens)
        except TypeError as error:
            out.write(f"{error}\n")
            out.write("(this means that you tried to get an attribute from a ")
            out.write("symbol, that it does not have)\n")
            return 0
        except RuntimeError as error:
            out.write(f"{error}\n")
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the calculator on standard input."""
    return run(sys.stdin, sys.stdout)