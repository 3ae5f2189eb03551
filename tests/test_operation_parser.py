import pytest

from chipmunk.errors import UnboundSymbol, UnexpectedEndOfInput, UnexpectedToken
from chipmunk.reader.ast import NumberLiteral, SymbolLiteral
from chipmunk.reader.lexer import tokenize
from chipmunk.reader.operation_parser import Operation, OperationParser, calculate
from chipmunk.types.symbol import Symbol


def parse_operation(source):
    return OperationParser(tokenize(source)).parse()


def test_parses_nested_operations():
    assert parse_operation("(+ 1 (* 2 x))") == Operation(
        "+",
        (NumberLiteral(1.0), Operation("*", (NumberLiteral(2.0), SymbolLiteral("x")))),
    )


def test_atoms():
    assert parse_operation("7") == NumberLiteral(7.0)
    assert parse_operation("true") == SymbolLiteral("true")


def test_operation_without_operands():
    assert parse_operation("(+)") == Operation("+", ())


@pytest.mark.parametrize("source", ['"s"', "'a", "(1 2)", "1 2", ")", "((+) 1)"])
def test_rejects_everything_else(source):
    with pytest.raises(UnexpectedToken):
        parse_operation(source)


@pytest.mark.parametrize("source", ["", "(", "(+ 1"])
def test_end_of_input(source):
    with pytest.raises(UnexpectedEndOfInput):
        parse_operation(source)


def test_calculate(env):
    assert calculate("(+ 1 (* 2 3))", env) == 7.0
    env.define(Symbol("x"), 4.0)
    assert calculate("(- x 1)", env) == 3.0
    with pytest.raises(UnboundSymbol):
        calculate("(+ y 1)", env)
