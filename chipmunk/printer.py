"""Text rendering for Chipmunk values and syntax.

Two renderers live here and are deliberately separate:

- `render` prints runtime values. A quoted symbol has already been resolved
  by evaluation, so `'pi` prints as `pi`.
- `render_node` prints syntax, used for lambda bodies. Quote shorthand is
  printed as the form it stands for, so `'pi` prints as `(quote pi)`.

`render(value, printable=False)` is the machine form: strings are quoted and
re-escaped so the text lexes back to an equal value. `printable=True` is the
human form: strings are written raw.
"""

from __future__ import annotations

import math
from decimal import Decimal

from chipmunk import LispValue
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
from chipmunk.types.lambda_fn import Lambda
from chipmunk.types.native_fn import NativeFunction
from chipmunk.types.nil import NilType
from chipmunk.types.symbol import Symbol


def render_number(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or a trailing .0"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def escape_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'


def render_boolean(value: bool) -> str:
    return "true" if value else "false"


def render(value: LispValue, printable: bool = False) -> str:
    match value:
        case bool():
            return render_boolean(value)
        case float() | int():
            return render_number(value)
        case str():
            return value if printable else escape_string(value)
        case Symbol():
            return value.name
        case NilType():
            return "nil"
        case tuple():
            return "(" + " ".join(render(v, printable) for v in value) + ")"
        case Lambda():
            params = " ".join(f.name for f in value.formals)
            return f"(lambda ({params}) {render_node(value.body)})"
        case NativeFunction():
            return value.name.name
        case _:
            return str(value)


def render_node(node: Node) -> str:
    match node:
        case NumberLiteral(value=value):
            return render_number(value)
        case StringLiteral(value=value):
            return escape_string(value)
        case SymbolLiteral(name=name):
            return name
        case BooleanLiteral(value=value):
            return render_boolean(value)
        case NilLiteral():
            return "nil"
        case QuoteForm(inner=inner):
            return f"(quote {render_node(inner)})"
        case ListForm(items=items):
            return "(" + " ".join(render_node(item) for item in items) + ")"
    raise TypeError(f"Not a syntax node: {node!r}")
