from chipmunk import EvaluatorFn
from chipmunk.errors import TypeMismatch, WrongArity
from chipmunk.evaluation.special_forms.quote_forms import to_value
from chipmunk.reader.ast import ListForm, Node, SymbolLiteral
from chipmunk.types.environment import Environment
from chipmunk.types.lambda_fn import Lambda
from chipmunk.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def lambda_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _depth,
) -> Lambda:
    # (lambda (params...) body) takes exactly one body form
    if len(tail) != 2:
        raise WrongArity(LAMBDA, "2", len(tail))

    params, body = tail
    if not isinstance(params, ListForm):
        raise TypeMismatch(LAMBDA, "parameter list", to_value(params))

    formals = []
    for param in params.items:
        if not isinstance(param, SymbolLiteral):
            raise TypeMismatch(LAMBDA, "parameter symbol", to_value(param))
        formals.append(Symbol(param.name))

    return Lambda(formals, body, env)
