"""Entry points tying the reader, evaluator and printer together."""

from __future__ import annotations

import logging
import sys

from chipmunk import LispValue, config
from chipmunk.builtins import register
from chipmunk.errors import NestingTooDeep, StackExhausted
from chipmunk.evaluation.evaluator import evaluate
from chipmunk.io_handler import ConsoleIO, IOHandler
from chipmunk.printer import render
from chipmunk.reader.lexer import tokenize
from chipmunk.reader.parser import TokenStream
from chipmunk.types.environment import Environment
from chipmunk.types.nil import Nil

logger = logging.getLogger(__name__)

# evaluate, apply and apply_lambda each hold a host frame per depth level
HOST_FRAMES_PER_LEVEL = 3
HOST_RECURSION_CEILING = 20_000


def reserve_host_stack(limit: int) -> None:
    """Raise the host recursion limit so `limit` evaluation levels fit in it."""
    needed = min(limit * HOST_FRAMES_PER_LEVEL + 200, HOST_RECURSION_CEILING)
    if sys.getrecursionlimit() < needed:
        logger.debug("raising recursion limit to %d", needed)
        sys.setrecursionlimit(needed)


def make_root_environment(io: IOHandler | None = None) -> Environment:
    """Return a fresh root frame holding the native operators."""
    env = Environment()
    register(env, io if io is not None else ConsoleIO())
    return env


def interpret(source: str, env: Environment) -> LispValue:
    """
    Evaluate every top-level form of `source` in `env`, in order.

    The whole source is lexed before anything runs. Returns the last value, or
    nil when the source holds no forms. A form that fails stops evaluation;
    bindings made by earlier forms are kept.
    """
    stream = TokenStream(tokenize(source))
    reserve_host_stack(config.get_max_depth())
    result: LispValue = Nil
    while not stream.eof():
        try:
            expr = stream.parse_expr()
        except RecursionError:
            raise NestingTooDeep(stream.max_depth) from None
        logger.debug("evaluating %r", expr)
        try:
            result = evaluate(expr, env)
        except RecursionError:
            # the host stack ran out before the configured depth limit did
            raise StackExhausted(config.get_max_depth()) from None
    return result


class Interpreter:
    """
    Owns a root environment across calls, so definitions persist between
    `eval` calls the way they do in a REPL session.
    """

    def __init__(self, io: IOHandler | None = None):
        self.io: IOHandler = io if io is not None else ConsoleIO()
        self.env: Environment = make_root_environment(self.io)

    def eval(self, code: str) -> LispValue:
        return interpret(code, self.env)

    def render(self, value: LispValue, printable: bool = False) -> str:
        return render(value, printable)
