# Core type aliases for Chipmunk's data model.
# Runtime values are plain Python types wherever one fits:
# - Number  -> float
# - String  -> str
# - Boolean -> bool
# - Nil     -> the Nil singleton (chipmunk.types.nil)
# - List    -> tuple (immutable, compared structurally)
# Symbols, lambdas and native functions have their own classes in chipmunk.types.
# Syntax is kept separate: the parser emits the node classes in chipmunk.reader.ast.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
