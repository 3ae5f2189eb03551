"""Core evaluator for the Chipmunk interpreter.

Dispatches on the syntax node: atoms evaluate to themselves, symbols are
looked up, quote shorthand is converted to data, and a ListForm is either a
special form (by its head symbol) or an application.
"""

from __future__ import annotations

from chipmunk import LispValue
from chipmunk.evaluation.apply import apply
from chipmunk.evaluation.depth import Depth
from chipmunk.evaluation.special_forms import SPECIAL_FORMS
from chipmunk.evaluation.special_forms.quote_forms import to_value
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


def evaluate(node: Node, env: Environment, depth: Depth | None = None) -> LispValue:
    """
    Evaluate `node` in `env`.

    `depth` is the caller's depth; each call goes one level deeper and raises
    StackExhausted past the limit. Top-level callers leave it as None.
    """
    depth = Depth.root() if depth is None else depth.deeper()

    match node:
        case NumberLiteral(value=value) | StringLiteral(value=value) | BooleanLiteral(value=value):
            return value
        case NilLiteral():
            return Nil
        case SymbolLiteral(name=name):
            return env.lookup(Symbol(name))
        case QuoteForm(inner=inner):
            return to_value(inner)
        case ListForm(items=()):
            return ()
        case ListForm(items=(SymbolLiteral(name=name), *tail)) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](tail, env, evaluate, depth)
        case ListForm(items=(head, *tail)):
            # Operator first, then arguments left to right
            fn = evaluate(head, env, depth)
            args = []
            for arg in tail:
                args.append(evaluate(arg, env, depth))
            return apply(fn, args, env, evaluate, depth)
    raise TypeError(f"Not a syntax node: {node!r}")
