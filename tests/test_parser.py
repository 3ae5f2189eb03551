import pytest

from chipmunk.errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from chipmunk.reader.ast import (
    BooleanLiteral,
    ListForm,
    NilLiteral,
    NumberLiteral,
    QuoteForm,
    StringLiteral,
    SymbolLiteral,
)
from chipmunk.reader.lexer import tokenize
from chipmunk.reader.parser import TokenStream, parse, read


def parse_source(source):
    return parse(tokenize(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", NilLiteral()),
        ("true", BooleanLiteral(True)),
        ("false", BooleanLiteral(False)),
        ("123", NumberLiteral(123.0)),
        ("-4.5", NumberLiteral(-4.5)),
        ('"hello"', StringLiteral("hello")),
        ("pi", SymbolLiteral("pi")),
        ("+", SymbolLiteral("+")),
        ("'a", QuoteForm(SymbolLiteral("a"))),
        ("''a", QuoteForm(QuoteForm(SymbolLiteral("a")))),
        ("()", ListForm(())),
        ("(a 1 \"s\")", ListForm((SymbolLiteral("a"), NumberLiteral(1.0), StringLiteral("s")))),
        ("(quote a)", ListForm((SymbolLiteral("quote"), SymbolLiteral("a")))),
        ("'(1 x)", QuoteForm(ListForm((NumberLiteral(1.0), SymbolLiteral("x"))))),
    ]
)
def test_parser(source, expected):
    assert parse_source(source) == expected


def test_nested_lists():
    expected = ListForm((
        ListForm((SymbolLiteral("a"), SymbolLiteral("b"))),
        ListForm((SymbolLiteral("c"), SymbolLiteral("d"))),
    ))
    assert parse_source("((a b) (c d))") == expected


def test_list_form_head_and_tail():
    form = parse_source("(f x y)")
    assert form.head == SymbolLiteral("f")
    assert form.tail == (SymbolLiteral("x"), SymbolLiteral("y"))
    assert ListForm(()).head is None


def test_parser_does_no_semantic_checks():
    # arity and binding problems are left for the evaluator
    assert parse_source("(lambda)") == ListForm((SymbolLiteral("lambda"),))
    assert parse_source("(1 2)") == ListForm((NumberLiteral(1.0), NumberLiteral(2.0)))


def test_missing_closing_parenthesis():
    with pytest.raises(UnexpectedEndOfInput) as exc:
        parse_source("(a (b")
    assert str(exc.value) == "expected closing parenthesis, found end of input"


def test_stray_closing_parenthesis():
    with pytest.raises(UnexpectedToken) as exc:
        parse_source(")")
    assert exc.value.expected == "expression"
    assert (exc.value.token.line, exc.value.token.column) == (1, 1)


@pytest.mark.parametrize("source", ["", "'"])
def test_end_of_input_where_expression_expected(source):
    with pytest.raises(UnexpectedEndOfInput):
        parse_source(source)


def test_parse_rejects_trailing_tokens():
    with pytest.raises(UnexpectedToken) as exc:
        parse_source("1 2")
    assert exc.value.expected == "end of input"


def test_read_returns_every_top_level_form():
    assert read("1 (a) 'b") == [
        NumberLiteral(1.0),
        ListForm((SymbolLiteral("a"),)),
        QuoteForm(SymbolLiteral("b")),
    ]


def test_token_stream_peek_does_not_consume():
    stream = TokenStream(tokenize("a b"))
    assert stream.peek().value == "a"
    assert stream.peek().value == "a"
    assert stream.advance().value == "a"
    assert stream.advance().value == "b"
    assert stream.advance() is None
    assert stream.eof()


def test_nesting_limit():
    source = "(" * 10 + ")" * 10
    with pytest.raises(NestingTooDeep) as exc:
        TokenStream(tokenize(source), max_depth=5).parse_expr()
    assert exc.value.limit == 5
    # within the limit it parses fine
    assert TokenStream(tokenize("((()))"), max_depth=5).parse_expr() is not None


def test_nesting_limit_from_environment(monkeypatch):
    monkeypatch.setenv("CHIPMUNK_MAX_PARSE_DEPTH", "3")
    with pytest.raises(NestingTooDeep):
        parse_source("'''''a")
