from chipmunk.types.symbol import Symbol
from chipmunk.types.nil import Nil, NilType
from chipmunk.types.environment import Environment
from chipmunk.types.lambda_fn import Lambda
from chipmunk.types.native_fn import Arity, NativeFunction

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Environment",
    "Lambda",
    "Arity",
    "NativeFunction",
]
