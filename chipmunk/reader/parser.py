"""
  Chipmunk parser

Recursive descent over a token stream. The parser only builds syntax:
special forms, arity and symbol existence are the evaluator's business.

    (  -> ListForm of the expressions up to the matching )
    '  -> QuoteForm wrapping the next expression
    true / false / nil -> BooleanLiteral / NilLiteral
    other symbols -> SymbolLiteral
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from chipmunk import config
from chipmunk.errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
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
from chipmunk.reader.lexer import lex
from chipmunk.reader.tokens import Token, TokenKind

ATOM_SYMBOLS: dict[str, Node] = {
    "true": BooleanLiteral(True),
    "false": BooleanLiteral(False),
    "nil": NilLiteral(),
}


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], max_depth: int | None = None):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.max_depth = max_depth if max_depth is not None else config.get_max_parse_depth()

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def eof(self) -> bool:
        return self.peek() is None

    def parse_expr(self, depth: int = 0) -> Node:
        if depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)

        token = self.advance()
        if token is None:
            raise UnexpectedEndOfInput("expression")

        match token.kind:
            case TokenKind.LEFT_PAREN:
                items = []
                while True:
                    nxt = self.peek()
                    if nxt is None:
                        raise UnexpectedEndOfInput("closing parenthesis")
                    if nxt.kind is TokenKind.RIGHT_PAREN:
                        self.advance()
                        return ListForm(tuple(items))
                    items.append(self.parse_expr(depth + 1))
            case TokenKind.NUMBER:
                return NumberLiteral(token.value)
            case TokenKind.STRING:
                return StringLiteral(token.value)
            case TokenKind.SYMBOL:
                if token.value in ATOM_SYMBOLS:
                    return ATOM_SYMBOLS[token.value]
                return SymbolLiteral(token.value)
            case TokenKind.QUOTE_MARK:
                return QuoteForm(self.parse_expr(depth + 1))
            case _:
                raise UnexpectedToken("expression", token)

    def parse_all(self) -> Iterator[Node]:
        while not self.eof():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> Node:
    """Parse exactly one expression; trailing tokens are an error."""
    stream = TokenStream(tokens)
    node = stream.parse_expr()
    trailing = stream.peek()
    if trailing is not None:
        raise UnexpectedToken("end of input", trailing)
    return node


def read(source: str) -> list[Node]:
    """Lex and parse every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
