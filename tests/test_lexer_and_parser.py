import pytest
from hypothesis import given, strategies as st

from lispi.errors import LispiIncompleteInput, LispiSyntaxError
from lispi.reader.parser import lex, read, TokenStream
from lispi.types.nil import Nil
from lispi.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ('"a \\" b"', [("string", '"a \\" b"')]),
        ("", []),
        ("   \n\t ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("foo", Symbol("foo")),
        ("empty?", Symbol("empty?")),
        ("make-adder", Symbol("make-adder")),
        ("-", Symbol("-")),
        ("<=", Symbol("<=")),
        ('"hi there"', "hi there"),
        ('"line\\nbreak"', "line\nbreak"),
        ('"q\\"q"', 'q"q'),
        ("()", []),
        ("(a (b 1) ())", [Symbol("a"), [Symbol("b"), 1], []]),
    ],
)
def test_parse_single_expression(source, expected):
    assert read(source) == [expected]


def test_booleans_are_not_numbers_after_parsing():
    assert read("true")[0] is True
    assert read("1")[0] is not True


def test_multiple_top_level_forms_and_comments():
    source = """
    ; define something
    (def x 1) ; trailing comment
    x
    """
    assert read(source) == [[Symbol("def"), Symbol("x"), 1], Symbol("x")]


def test_token_stream_returns_none_at_end():
    stream = TokenStream(lex("1 2"))
    assert stream.parse_expr() == 1
    assert stream.parse_expr() == 2
    assert stream.parse_expr() is None


@pytest.mark.parametrize("source", [")", "(a))", "1abc", "@", "(foo #bar)"])
def test_syntax_errors(source):
    with pytest.raises(LispiSyntaxError):
        read(source)


@pytest.mark.parametrize("source", ["(", "(a (b c)", '"unterminated', '(a "b'])
def test_incomplete_input(source):
    with pytest.raises(LispiIncompleteInput):
        read(source)


@given(st.integers())
def test_integers_read_back(n):
    assert read(str(n)) == [n]


@given(st.lists(st.integers(), max_size=20))
def test_flat_forms_read_in_order(ns):
    source = "(" + " ".join(str(n) for n in ns) + ")"
    assert read(source) == [ns]


def test_deeply_nested_forms_read_without_recursion():
    depth = 20_000
    (form,) = read("(list " * depth + ")" * depth)
    levels = 1
    while len(form) == 2:
        assert form[0] is Symbol("list")
        form = form[1]
        levels += 1
    assert form == [Symbol("list")]
    assert levels == depth


def test_deeply_nested_unclosed_form_is_incomplete():
    with pytest.raises(LispiIncompleteInput):
        read("(" * 20_000)


def test_symbols_are_interned():
    assert Symbol("abc") is Symbol("abc")
    assert read("(abc abc)")[0][0] is read("abc")[0]
    assert Symbol("abc") is not Symbol("abd")
