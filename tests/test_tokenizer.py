import io

import pytest

from calcbench.filereader import FileReader
from calcbench.symbol import Location, SymType
from calcbench.tokenizer import Tokenizer


def make(text):
    return Tokenizer(FileReader(io.StringIO(text), "test"))


def types(text):
    return [sym.tp for sym in make(text).tokens()]


def test_simple_expression_types():
    assert types("sin(x) + 3;") == [
        SymType.SIN,
        SymType.LPAR,
        SymType.VAR,
        SymType.RPAR,
        SymType.PLUS,
        SymType.NUM,
        SymType.SEMICOLON,
        SymType.EOF,
    ]


def test_number_attribute():
    tok = make("2.5")
    assert tok.current().get_double() == 2.5


def test_variable_attribute():
    tok = make("foo_1 ")
    sym = tok.current()
    assert sym.tp is SymType.VAR
    assert sym.get_string() == "foo_1"


def test_comments_and_whitespace_are_skipped():
    assert types("/* c */ 7 // x\n;") == [SymType.NUM, SymType.SEMICOLON, SymType.EOF]


def test_current_is_stable_until_consumed():
    tok = make("a b")
    first = tok.current()
    assert tok.current() is first
    tok.consume()
    assert tok.current().get_string() == "b"


def test_consume_at_eof_raises():
    tok = make("")
    assert tok.current().tp is SymType.EOF
    with pytest.raises(RuntimeError):
        tok.consume()


def test_garbage_keeps_its_text():
    tok = make("$")
    sym = tok.current()
    assert sym.tp is SymType.GARBAGE
    assert sym.get_string() == "$"


def test_location_after_newline():
    syms = list(make("x\n  y").tokens())
    assert syms[0].loc == Location(0, 0)
    assert syms[1].loc == Location(1, 2)


def test_unterminated_comment_gives_div_then_filebad():
    tok = make("/* abc")
    assert list(s.tp for s in tok.tokens()) == [SymType.DIV, SymType.FILEBAD]
    with pytest.raises(RuntimeError):
        tok.consume()


def test_incomplete_exponent_uses_prefix():
    tok = make("1e")
    assert tok.current().get_double() == 1.0


def test_negative_number_literal():
    tok = make("-4;")
    sym = tok.current()
    assert sym.tp is SymType.NUM
    assert sym.get_double() == -4.0


def test_tokens_stop_at_quit():
    syms = list(make("1; quit; 2;").tokens())
    assert syms[-1].tp is SymType.QUIT
    assert len(syms) == 3


def test_str_without_and_with_lookahead():
    tok = make("7;")
    assert str(tok).endswith("   (no lookahead)")
    sym = tok.current()
    assert str(tok).endswith(f"   lookahead = {sym}")
    assert str(tok).startswith("Source\n   filereader( test")