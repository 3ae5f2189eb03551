from chipmunk import EvaluatorFn
from chipmunk.reader.ast import Node
from chipmunk.types.environment import Environment


def list_form(
    tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, depth
) -> tuple:
    items = []
    for expr in tail:
        items.append(evaluate_fn(expr, env, depth))
    return tuple(items)
