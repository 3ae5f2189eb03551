from chipmunk import LispValue, EvaluatorFn
from chipmunk.errors import WrongArity
from chipmunk.reader.ast import (
    BooleanLiteral,
    ListForm,
    NilLiteral,
    Node,
    NumberLiteral,
    QuoteForm,
    StringLiteral,
    SymbolLiteral,
)
from chipmunk.types.environment import Environment
from chipmunk.types.nil import Nil
from chipmunk.types.symbol import Symbol

QUOTE = Symbol("quote")


def to_value(node: Node) -> LispValue:
    """Convert syntax to data without evaluating anything."""
    match node:
        case NumberLiteral(value=value) | StringLiteral(value=value) | BooleanLiteral(value=value):
            return value
        case NilLiteral():
            return Nil
        case SymbolLiteral(name=name):
            return Symbol(name)
        case QuoteForm(inner=inner):
            # Nested shorthand ''a becomes the data (quote a)
            return (QUOTE, to_value(inner))
        case ListForm(items=items):
            return tuple(to_value(item) for item in items)
    raise TypeError(f"Not a syntax node: {node!r}")


def quote_form(
    tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, _depth
) -> LispValue:
    if len(tail) != 1:
        raise WrongArity(QUOTE, "1", len(tail))
    return to_value(tail[0])
