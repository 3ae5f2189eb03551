from chipmunk import EvaluatorFn, LispValue
from chipmunk.errors import WrongArity
from chipmunk.reader.ast import Node
from chipmunk.types.boolean import is_truthy
from chipmunk.types.environment import Environment
from chipmunk.types.symbol import Symbol


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth,
) -> LispValue:
    if len(tail) != 3:
        raise WrongArity(Symbol("if"), "3", len(tail))

    test, then_branch, else_branch = tail
    if is_truthy(evaluate_fn(test, env, depth)):
        return evaluate_fn(then_branch, env, depth)
    return evaluate_fn(else_branch, env, depth)
