"""Translate Chipmunk syntax into JavaScript source.

The translation works on the parsed tree, never on values, and produces one
JavaScript expression per node:

    (list a b)          -> [a, b]
    (lambda (x) body)   -> ((x) => body)
    (if c a b)          -> (c ? a : b)
    (define x v)        -> var x = v;      at top level, (x = v) elsewhere
    (log a b)           -> console.log(a, b)
    (nth xs i)          -> xs[i]
    (+ a b c)           -> (a + b + c)
    (= a b)             -> (a === b)
    'data               -> array / literal, symbols as strings
    (f a b)             -> f(a, b)

Symbols become camelCase identifiers: multi-word-name -> multiWordName.
"""

from __future__ import annotations

import json
import re

from chipmunk.errors import CompileError
from chipmunk.printer import render_node, render_number
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
from chipmunk.reader.parser import read

ARITHMETIC = {"+": "0", "-": None, "*": "1", "/": None}  # operator -> identity for (op)
COMPARISON = {"<": "<", ">": ">", "<=": "<=", ">=": ">=", "=": "==="}

OPERATOR_FUNCTIONS = {
    "+": "((a, b) => a + b)",
    "-": "((a, b) => a - b)",
    "*": "((a, b) => a * b)",
    "/": "((a, b) => a / b)",
    "<": "((a, b) => a < b)",
    ">": "((a, b) => a > b)",
    "<=": "((a, b) => a <= b)",
    ">=": "((a, b) => a >= b)",
    "=": "((a, b) => a === b)",
}

JS_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

RESERVED_WORDS = frozenset("""
    await break case catch class const continue debugger default delete do else
    enum export extends false finally for function if import in instanceof let
    new null return super switch this throw true try typeof var void while with
    yield
""".split())


def identifier(name: str) -> str:
    if name in OPERATOR_FUNCTIONS:
        raise CompileError(f"operator {name} cannot be used as a name")
    head, *rest = name.split("-")
    ident = head + "".join(part[:1].upper() + part[1:] for part in rest)
    if not JS_IDENTIFIER_RE.fullmatch(ident):
        raise CompileError(f"{name} is not a valid JavaScript name")
    return "_" + ident if ident in RESERVED_WORDS else ident


def quoted(node: Node) -> str:
    """Literal data for a quoted form; symbols become strings."""
    match node:
        case NumberLiteral(value=value):
            return render_number(value)
        case StringLiteral(value=value):
            return json.dumps(value)
        case SymbolLiteral(name=name):
            return json.dumps(name)
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case NilLiteral():
            return "null"
        case QuoteForm(inner=inner):
            return f'["quote", {quoted(inner)}]'
        case ListForm(items=items):
            return "[" + ", ".join(quoted(item) for item in items) + "]"
    raise CompileError(f"not a syntax node: {node!r}")


def _arguments(nodes) -> list[str]:
    return [emit(node) for node in nodes]


def _expect(name: str, args, count: int) -> None:
    if len(args) != count:
        raise CompileError(f"{name} expects {count} operand(s), got {len(args)}")


def _emit_arithmetic(op: str, args: list[str]) -> str:
    if not args:
        identity = ARITHMETIC[op]
        if identity is None:
            raise CompileError(f"{op} expects at least 1 operand")
        return identity
    if len(args) == 1:
        if op == "-":
            return f"(- {args[0]})"
        if op == "/":
            return f"(1 / {args[0]})"
        return args[0]
    return "(" + f" {op} ".join(args) + ")"


def _emit_comparison(op: str, args: list[str]) -> str:
    if not args:
        raise CompileError(f"{op} expects at least 1 operand")
    if len(args) == 1:
        return "true"
    js_op = COMPARISON[op]
    pairs = [f"{a} {js_op} {b}" for a, b in zip(args, args[1:])]
    return "(" + " && ".join(pairs) + ")"


def _emit_form(name: str, tail: tuple[Node, ...]) -> str | None:
    """Translate a form headed by the symbol `name`; None for ordinary calls."""
    match name:
        case "quote":
            _expect(name, tail, 1)
            return quoted(tail[0])
        case "list":
            return "[" + ", ".join(_arguments(tail)) + "]"
        case "lambda":
            _expect(name, tail, 2)
            params, body = tail
            if not isinstance(params, ListForm) or not all(
                isinstance(p, SymbolLiteral) for p in params.items
            ):
                raise CompileError(f"malformed parameter list: {render_node(params)}")
            names = ", ".join(identifier(p.name) for p in params.items)
            return f"(({names}) => {emit(body)})"
        case "if":
            _expect(name, tail, 3)
            test, then_branch, else_branch = _arguments(tail)
            return f"({test} ? {then_branch} : {else_branch})"
        case "define":
            _expect(name, tail, 2)
            target, value = tail
            if not isinstance(target, SymbolLiteral):
                raise CompileError(f"cannot define {render_node(target)}")
            return f"({identifier(target.name)} = {emit(value)})"
        case "log":
            return "console.log(" + ", ".join(_arguments(tail)) + ")"
        case "nth":
            _expect(name, tail, 2)
            items, index = _arguments(tail)
            return f"{items}[{index}]"
        case "not":
            _expect(name, tail, 1)
            return f"(!{emit(tail[0])})"
        case _ if name in ARITHMETIC:
            return _emit_arithmetic(name, _arguments(tail))
        case _ if name in COMPARISON:
            return _emit_comparison(name, _arguments(tail))
    return None


def emit(node: Node) -> str:
    """Translate one node into a JavaScript expression."""
    match node:
        case NumberLiteral(value=value):
            return render_number(value)
        case StringLiteral(value=value):
            return json.dumps(value)
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case NilLiteral():
            return "null"
        case SymbolLiteral(name=name):
            return OPERATOR_FUNCTIONS.get(name) or identifier(name)
        case QuoteForm(inner=inner):
            return quoted(inner)
        case ListForm(items=()):
            return "[]"
        case ListForm(items=(SymbolLiteral(name=name), *tail)):
            form = _emit_form(name, tuple(tail))
            if form is not None:
                return form
            return f"{identifier(name)}(" + ", ".join(_arguments(tail)) + ")"
        case ListForm(items=(ListForm() as head, *tail)):
            # a lambda in operator position becomes an IIFE
            return f"{emit(head)}(" + ", ".join(_arguments(tail)) + ")"
        case ListForm(items=(head, *_)):
            raise CompileError(f"not callable: {render_node(head)}")
    raise CompileError(f"not a syntax node: {node!r}")


def compile_source(source: str) -> str:
    """Translate a whole program into newline-separated JavaScript statements."""
    statements = []
    for node in read(source):
        match node:
            case ListForm(items=(SymbolLiteral(name="define"), SymbolLiteral(name=name), value)):
                statements.append(f"var {identifier(name)} = {emit(value)};")
            case _:
                statements.append(f"{emit(node)};")
    return "\n".join(statements)
