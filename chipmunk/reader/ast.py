"""Syntax tree produced by the parser.

Nodes are syntax, not values: the evaluator turns them into runtime values
and the printer can render them back as source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class SymbolLiteral:
    name: str


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True)
class NilLiteral:
    pass


@dataclass(frozen=True)
class QuoteForm:
    """'expr shorthand; (quote expr) stays an ordinary ListForm."""
    inner: Node


@dataclass(frozen=True)
class ListForm:
    """Any parenthesised form: calls and special forms alike."""
    items: tuple[Node, ...] = ()

    @property
    def head(self) -> Node | None:
        return self.items[0] if self.items else None

    @property
    def tail(self) -> tuple[Node, ...]:
        return self.items[1:]


Node = Union[
    NumberLiteral,
    StringLiteral,
    SymbolLiteral,
    BooleanLiteral,
    NilLiteral,
    QuoteForm,
    ListForm,
]
