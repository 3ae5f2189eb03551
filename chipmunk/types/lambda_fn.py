"""Lambda function representation and argument binding for Chipmunk."""

from __future__ import annotations

from chipmunk import LispValue
from chipmunk.errors import WrongArity
from chipmunk.reader.ast import Node
from chipmunk.types.environment import Environment
from chipmunk.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, an unevaluated body and a closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Node, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: Node = body
        # Captured by reference; the frame lives as long as this lambda does
        self.env: Environment = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the formal parameters in a fresh child of the closure env."""
        if len(args) != len(self.formals):
            raise WrongArity(self, str(len(self.formals)), len(args))
        local_env = self.env.child()
        for formal, arg in zip(self.formals, args):
            local_env.define(formal, arg)
        return local_env

    def __str__(self) -> str:
        from chipmunk.printer import render
        return render(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
