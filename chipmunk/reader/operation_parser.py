"""Restricted "calculator" grammar.

Only three shapes are accepted:

    number
    symbol
    (operator operand...)      operator must be a symbol token

No strings, quoting, lambda or literal keywords, and the whole input must be
a single expression. This reader is independent of the main parser and is
never used by `interpret`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from chipmunk import LispValue
from chipmunk.errors import NotCallable, UnexpectedEndOfInput, UnexpectedToken
from chipmunk.reader.ast import NumberLiteral, SymbolLiteral
from chipmunk.reader.lexer import lex
from chipmunk.reader.parser import TokenStream
from chipmunk.reader.tokens import Token, TokenKind
from chipmunk.types.environment import Environment
from chipmunk.types.native_fn import NativeFunction
from chipmunk.types.symbol import Symbol


@dataclass(frozen=True)
class Operation:
    operator: str
    operands: tuple[OperationNode, ...]


OperationNode = Union[NumberLiteral, SymbolLiteral, Operation]


class OperationParser:
    def __init__(self, tokens: Iterable[Token]):
        self.stream = TokenStream(tokens)

    def consume(self, kind: TokenKind, expected: str) -> Token:
        token = self.stream.advance()
        if token is None:
            raise UnexpectedEndOfInput(expected)
        if token.kind is not kind:
            raise UnexpectedToken(expected, token)
        return token

    def parse(self) -> OperationNode:
        result = self.parse_expression()
        trailing = self.stream.peek()
        if trailing is not None:
            raise UnexpectedToken("end of input", trailing)
        return result

    def parse_expression(self) -> OperationNode:
        token = self.stream.peek()
        if token is None:
            raise UnexpectedEndOfInput("number or operation")
        match token.kind:
            case TokenKind.LEFT_PAREN:
                return self.parse_operation()
            case TokenKind.NUMBER:
                return NumberLiteral(self.stream.advance().value)
            case TokenKind.SYMBOL:
                return SymbolLiteral(self.stream.advance().value)
            case _:
                raise UnexpectedToken("number or operation", token)

    def parse_operation(self) -> Operation:
        self.consume(TokenKind.LEFT_PAREN, "(")
        operator = self.consume(TokenKind.SYMBOL, "operator").value
        operands = []
        while True:
            token = self.stream.peek()
            if token is None:
                raise UnexpectedEndOfInput("closing parenthesis")
            if token.kind is TokenKind.RIGHT_PAREN:
                break
            operands.append(self.parse_expression())
        self.consume(TokenKind.RIGHT_PAREN, ")")
        return Operation(operator, tuple(operands))


def evaluate_operation(node: OperationNode, env: Environment) -> LispValue:
    match node:
        case NumberLiteral(value=value):
            return value
        case SymbolLiteral(name=name):
            return env.lookup(Symbol(name))
        case Operation(operator=operator, operands=operands):
            fn = env.lookup(Symbol(operator))
            if not isinstance(fn, NativeFunction):
                raise NotCallable(fn)
            return fn(env, [evaluate_operation(o, env) for o in operands])


def calculate(source: str, env: Environment) -> LispValue:
    """Parse `source` with the restricted grammar and evaluate it against `env`."""
    return evaluate_operation(OperationParser(lex(source)).parse(), env)
