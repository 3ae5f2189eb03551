import math

import pytest
from hypothesis import given, strategies as st

from chipmunk.builtins import is_equal
from chipmunk.interpreter import interpret
from chipmunk.printer import escape_string, render, render_node, render_number
from chipmunk.reader.ast import ListForm, QuoteForm, SymbolLiteral
from chipmunk.types.nil import Nil
from chipmunk.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected,printable",
    [
        ("true", "true", False),
        ("false", "false", False),
        ("+", "+", False),
        ("nil", "nil", False),
        ("3.14", "3.14", False),
        ("'pi", "pi", False),
        ("'pi", "pi", True),
        # strings, machine form
        (r'"test"', r'"test"', False),
        (r'"test\ntest"', r'"test\ntest"', False),
        (r'"\"test\""', r'"\"test\""', False),
        (r'"\\test\\"', r'"\\test\\"', False),
        # strings, printable form
        (r'"test"', "test", True),
        (r'"test\ntest"', "test\ntest", True),
        (r'"\"test\""', '"test"', True),
        (r'"\\test\\"', "\\test\\", True),
    ]
)
def test_render_after_interpret(env, source, expected, printable):
    assert render(interpret(source, env), printable) == expected


def test_quoted_symbol_unwraps_inside_list_value(env):
    source = "(list true (lambda (x) (* x x)) + 3.14 'pi \"pi\")"
    assert render(interpret(source, env)) == '(true (lambda (x) (* x x)) + 3.14 pi "pi")'


def test_quote_stays_literal_inside_lambda_body(env):
    source = "(lambda () (list true (lambda (x) (* x x)) + 3.14 'pi \"pi\"))"
    assert render(interpret(source, env)) == (
        '(lambda () (list true (lambda (x) (* x x)) + 3.14 (quote pi) "pi"))'
    )


def test_lambda_body_is_syntax_in_both_modes(env):
    lam = interpret(r'(lambda (a b) (log "x\ny" a))', env)
    expected = r'(lambda (a b) (log "x\ny" a))'
    assert render(lam) == expected
    assert render(lam, printable=True) == expected


def test_list_rendering_follows_mode(env):
    value = interpret(r'(list "a\"b" (list "c"))', env)
    assert render(value) == r'("a\"b" ("c"))'
    assert render(value, printable=True) == '(a"b (c))'


@pytest.mark.parametrize(
    "value,expected",
    [
        (3.0, "3"),
        (3.14, "3.14"),
        (-2.5, "-2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e21, "1000000000000000000000"),
        (1e-7, "0.0000001"),
        (-0.0, "0"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ]
)
def test_render_number(value, expected):
    assert render_number(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "nil"),
        (Symbol("multi-word"), "multi-word"),
        ((), "()"),
        ((1.0, (Symbol("a"), ()), "s"), '(1 (a ()) "s")'),
    ]
)
def test_render_values(value, expected):
    assert render(value) == expected


def test_render_native_function(env):
    assert render(env.lookup(Symbol("<="))) == "<="


def test_render_node_keeps_quote_shorthand_as_form():
    node = ListForm((SymbolLiteral("f"), QuoteForm(QuoteForm(SymbolLiteral("a")))))
    assert render_node(node) == "(f (quote (quote a)))"


def test_escape_string():
    assert escape_string('a"b\\c\nd') == r'"a\"b\\c\nd"'


@pytest.mark.parametrize(
    "source",
    ["3.14", "-7", "true", "false", "nil", r'"a\"b\\c\nd"', "+", "not", "()"],
)
def test_machine_form_reads_back(env, source):
    value = interpret(source, env)
    again = interpret(render(value), env)
    assert is_equal(value, again)


def test_lambda_text_reads_back_to_equivalent_lambda(env):
    lam = interpret("(lambda (x) (* x 'y))", env)
    again = interpret(render(lam), env)
    assert again.formals == lam.formals
    assert render(again) == render(lam)


@given(st.text(max_size=30))
def test_strings_survive_machine_form(text):
    from chipmunk.interpreter import make_root_environment
    env = make_root_environment()
    assert interpret(escape_string(text), env) == text
    assert render(interpret(escape_string(text), env)) == escape_string(text)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_numbers_survive_machine_form(value):
    from chipmunk.interpreter import make_root_environment
    assert interpret(render(value), make_root_environment()) == value
