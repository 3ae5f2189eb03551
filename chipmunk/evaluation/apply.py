"""Application engine for Chipmunk.

Applies an already-evaluated operator to already-evaluated arguments. Native
functions check their own arity; lambdas bind a fresh child of their closure
environment and evaluate the body there. There is no tail-call elimination:
every lambda call costs one level of evaluation depth.
"""

from __future__ import annotations

from chipmunk import LispValue, EvaluatorFn
from chipmunk.errors import NotCallable
from chipmunk.evaluation.depth import Depth
from chipmunk.types.environment import Environment
from chipmunk.types.lambda_fn import Lambda
from chipmunk.types.native_fn import NativeFunction


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    depth: Depth,
) -> LispValue:
    """Apply a Lisp Lambda value; argument count must equal parameter count."""
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env, depth)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: Depth,
) -> LispValue:
    """Apply either a Lambda or a NativeFunction; anything else is not callable."""
    if isinstance(head, NativeFunction):
        return head(env, args)
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn, depth)
    raise NotCallable(head)
