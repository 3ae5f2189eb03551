from chipmunk import EvaluatorFn, LispValue
from chipmunk.errors import TypeMismatch, WrongArity
from chipmunk.evaluation.special_forms.quote_forms import to_value
from chipmunk.reader.ast import Node, SymbolLiteral
from chipmunk.types.environment import Environment
from chipmunk.types.symbol import Symbol

DEFINE = Symbol("define")


def define_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth,
) -> LispValue:
    """(define name expr): bind in the current frame and return the value."""
    if len(tail) != 2:
        raise WrongArity(DEFINE, "2", len(tail))

    name, expr = tail
    if not isinstance(name, SymbolLiteral):
        raise TypeMismatch(DEFINE, "symbol", to_value(name))

    value = evaluate_fn(expr, env, depth)
    env.define(Symbol(name.name), value)
    return value
