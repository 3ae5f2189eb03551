"""Native (Python-implemented) functions exposed to Chipmunk code."""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from chipmunk import LispValue
from chipmunk.errors import WrongArity
from chipmunk.types.environment import Environment
from chipmunk.types.symbol import Symbol

NativeOperation = Callable[[Environment, list[LispValue]], LispValue]


class Arity(NamedTuple):
    """Accepted argument counts: at least `minimum`, at most `maximum` (None = unbounded)."""

    minimum: int = 0
    maximum: Optional[int] = None

    def accepts(self, count: int) -> bool:
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def __str__(self) -> str:
        if self.maximum is None:
            return f"at least {self.minimum}"
        if self.maximum == self.minimum:
            return str(self.minimum)
        return f"{self.minimum} to {self.maximum}"


class NativeFunction:
    """A named Python operation with an arity policy.

    The operation is called as `fn(env, args)`, the same calling convention
    the builtins in chipmunk.builtins use.
    """

    __slots__ = ("name", "arity", "fn")

    def __init__(self, name: Symbol, fn: NativeOperation, arity: Arity = Arity()):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        if not self.arity.accepts(len(args)):
            raise WrongArity(self.name, str(self.arity), len(args))
        return self.fn(env, args)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"<native {self.name}>"
