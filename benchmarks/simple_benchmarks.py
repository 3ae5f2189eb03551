from timeit import timeit

from chipmunk.evaluation.evaluator import evaluate
from chipmunk.interpreter import interpret, make_root_environment
from chipmunk.io_handler import BufferedIO
from chipmunk.printer import render
from chipmunk.reader.lexer import tokenize
from chipmunk.reader.parser import parse
from chipmunk.types.environment import Environment
from chipmunk.types.symbol import Symbol


def _parse_one(code: str):
    return parse(tokenize(code))


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: the source is lexed and parsed once up front."""
    env = make_root_environment(BufferedIO())
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, env)
    # Timed
    return timeit(lambda: evaluate(expr, env), number=rounds)


def time_pipeline(code: str, rounds: int) -> float:
    """Time the whole pipeline: lex, parse, evaluate and render."""
    env = make_root_environment(BufferedIO())
    return timeit(lambda: render(interpret(code, env)), number=rounds)


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42.0)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

RECURSION_CODE = r"""
[ factorial without tail calls; depth stays well under the limit ]
((lambda (fact) (fact fact 20))
 (lambda (self n) (if (<= n 1) 1 (* n (self self (- n 1))))))
"""

LIST_BUILD_CODE = "(list 1 \"two\" 'three (list 4 5) (lambda (x) x))"


def _print_pair(name: str, code: str, rounds: int) -> None:
    teval = time_evaluator(code, rounds)
    tall = time_pipeline(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  evaluate only: {teval:.6f}s  |  full pipeline: {tall:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_pair("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_pair("recursion (factorial 20)", RECURSION_CODE, rounds=500)
    _print_pair("list construction", LIST_BUILD_CODE, rounds=5000)
