"""Native operators for the Chipmunk root environment.

Every native takes `(env, args)` like the rest of the runtime's callables and
is wrapped in a NativeFunction carrying its name and arity policy.
"""
from __future__ import annotations

from typing import Callable

from chipmunk import LispValue
from chipmunk.errors import DivisionByZero, TypeMismatch
from chipmunk.io_handler import IOHandler
from chipmunk.printer import render
from chipmunk.types.boolean import is_truthy
from chipmunk.types.environment import Environment
from chipmunk.types.native_fn import Arity, NativeFunction
from chipmunk.types.nil import Nil
from chipmunk.types.symbol import Symbol


# -------------------------------
# Argument checks
# -------------------------------
def is_number(value: LispValue) -> bool:
    # bool is an int subclass in Python; it is never a Chipmunk number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def numbers(name: str, args: list[LispValue]) -> list[float]:
    for arg in args:
        if not is_number(arg):
            raise TypeMismatch(Symbol(name), "number", arg)
    return [float(arg) for arg in args]


def sequence(name: str, value: LispValue) -> tuple:
    if not isinstance(value, tuple):
        raise TypeMismatch(Symbol(name), "list", value)
    return value


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; booleans and numbers are never equal to each other."""
    if a is b:
        return True
    if isinstance(a, tuple) and isinstance(b, tuple):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return float(a) == float(b)
    if type(a) != type(b):
        return False
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> float:
    return sum(numbers("+", args), 0.0)


def sub(env: Environment, args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> float:
    result = 1.0
    for x in numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> float:
    nums = numbers("/", args)
    if len(nums) == 1:
        nums = [1.0] + nums
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise DivisionByZero(Symbol("/"))
        result /= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def comparison(name: str, test: Callable[[float, float], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        nums = numbers(name, args)
        return all(test(a, b) for a, b in zip(nums, nums[1:]))
    return compare


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(env: Environment, args: list[LispValue]) -> bool:
    return not is_truthy(args[0])


# -------------------------------
# List operations
# -------------------------------
def first(env: Environment, args: list[LispValue]) -> LispValue:
    items = sequence("first", args[0])
    return items[0] if items else Nil


def rest(env: Environment, args: list[LispValue]) -> tuple:
    return sequence("rest", args[0])[1:]


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    items = sequence("nth", args[0])
    index = args[1]
    if not is_number(index) or not float(index).is_integer():
        raise TypeMismatch(Symbol("nth"), "whole number index", index)
    index = int(index)
    if 0 <= index < len(items):
        return items[index]
    return Nil


def length(env: Environment, args: list[LispValue]) -> float:
    value = args[0]
    if isinstance(value, str):
        return float(len(value))
    return float(len(sequence("length", value)))


def cons(env: Environment, args: list[LispValue]) -> tuple:
    head, tail = args
    if tail is Nil:
        return (head,)
    return (head,) + sequence("cons", tail)


# -------------------------------
# Output
# -------------------------------
def make_log(io: IOHandler):
    def log(env: Environment, args: list[LispValue]) -> LispValue:
        io.write_line(" ".join(render(arg, printable=True) for arg in args))
        return Nil
    return log


# -------------------------------
# Registration
# -------------------------------
def native(name: str, fn, minimum: int = 0, maximum: int | None = None) -> tuple[Symbol, NativeFunction]:
    symbol = Symbol(name)
    return symbol, NativeFunction(symbol, fn, Arity(minimum, maximum))


def register(env: Environment, io: IOHandler) -> None:
    env.update(dict([
        native('+', add),
        native('-', sub, 1),
        native('*', mul),
        native('/', div, 1),
        native('=', equals, 1),
        native('<', comparison('<', lambda a, b: a < b), 1),
        native('>', comparison('>', lambda a, b: a > b), 1),
        native('<=', comparison('<=', lambda a, b: a <= b), 1),
        native('>=', comparison('>=', lambda a, b: a >= b), 1),
        native('not', logical_not, 1, 1),
        native('first', first, 1, 1),
        native('rest', rest, 1, 1),
        native('nth', nth, 2, 2),
        native('length', length, 1, 1),
        native('cons', cons, 2, 2),
        native('log', make_log(io)),
    ]))
