import pytest

from chipmunk.builtins import is_equal, is_number
from chipmunk.errors import DivisionByZero, TypeMismatch, WrongArity
from chipmunk.interpreter import interpret
from chipmunk.types.native_fn import Arity, NativeFunction
from chipmunk.types.nil import Nil
from chipmunk.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", 0.0),
        ("(+ 1 2 3)", 6.0),
        ("(- 5)", -5.0),
        ("(- 10 1 2)", 7.0),
        ("(*)", 1.0),
        ("(* 2 3 4)", 24.0),
        ("(/ 2)", 0.5),
        ("(/ 9 3)", 3.0),
        ("(+ 0.1 0.2)", 0.1 + 0.2),
    ]
)
def test_arithmetic(env, source, expected):
    assert interpret(source, env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1 1)", True),
        ("(= 1 2)", False),
        ("(= 1)", True),
        ("(= 1 true)", False),
        ("(= nil false)", False),
        ("(= \"a\" \"a\")", True),
        ("(= 'a 'a)", True),
        ("(= (list 1 2) '(1 2))", True),
        ("(= '(1 2) '(1 2 3))", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(> 3 2 1)", True),
        ("(<= 1 1 2)", True),
        ("(>= 3 3)", True),
        ("(>= 2 3)", False),
        ("(not nil)", True),
        ("(not false)", True),
        ("(not 0)", False),
    ]
)
def test_comparison_and_logic(env, source, expected):
    assert interpret(source, env) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(first '(1 2))", 1.0),
        ("(first '())", Nil),
        ("(rest '(1 2 3))", (2.0, 3.0)),
        ("(rest '())", ()),
        ("(nth '(a b c) 1)", Symbol("b")),
        ("(nth '(a) 5)", Nil),
        ("(length \"abc\")", 3.0),
        ("(length '(1 2))", 2.0),
        ("(cons 1 '(2))", (1.0, 2.0)),
        ("(cons 1 nil)", (1.0,)),
    ]
)
def test_list_operations(env, source, expected):
    assert interpret(source, env) == expected


@pytest.mark.parametrize(
    "source,name",
    [
        ('(+ 1 "a")', "+"),
        ("(+ true 1)", "+"),
        ("(- 'a)", "-"),
        ("(< 1 nil)", "<"),
        ("(first 1)", "first"),
        ("(rest \"abc\")", "rest"),
        ("(nth '(a) 0.5)", "nth"),
        ("(nth 1 0)", "nth"),
        ("(length 1)", "length"),
        ("(cons 1 2)", "cons"),
    ]
)
def test_type_mismatch_names_the_operator(env, source, name):
    with pytest.raises(TypeMismatch) as exc:
        interpret(source, env)
    assert exc.value.name == Symbol(name)


def test_type_mismatch_message(env):
    with pytest.raises(TypeMismatch) as exc:
        interpret('(* 2 "x")', env)
    assert str(exc.value) == '*: expected number, got "x"'


def test_division_by_zero(env):
    with pytest.raises(DivisionByZero):
        interpret("(/ 1 0)", env)
    with pytest.raises(DivisionByZero):
        interpret("(/ 0)", env)


@pytest.mark.parametrize("source", ["(-)", "(/)", "(=)", "(<)", "(nth '(1))", "(cons 1)", "(first '(1) '(2))"])
def test_native_arity(env, source):
    with pytest.raises(WrongArity):
        interpret(source, env)


def test_log_writes_printable_line(env, io):
    assert interpret("(log \"a\" 1 'b \"x\\ny\" (list \"q\"))", env) is Nil
    assert io.output == ["a 1 b x\ny (q)"]
    assert interpret("(log)", env) is Nil
    assert io.output[-1] == ""


def test_natives_are_first_class(env):
    assert interpret("((lambda (f) (f 2 3)) *)", env) == 6.0


def test_is_equal_and_is_number():
    assert is_equal((1.0, (Symbol("a"),)), (1.0, (Symbol("a"),)))
    assert not is_equal(True, 1.0)
    assert not is_equal(0.0, False)
    assert is_number(1.0)
    assert not is_number(True)


def test_arity_policy():
    assert Arity(1, 1).accepts(1)
    assert not Arity(1, 1).accepts(2)
    assert Arity(2).accepts(10)
    assert str(Arity(1)) == "at least 1"
    assert str(Arity(1, 3)) == "1 to 3"


def test_native_function_checks_arity_before_calling():
    calls = []
    fn = NativeFunction(Symbol("probe"), lambda env, args: calls.append(args), Arity(0, 1))
    with pytest.raises(WrongArity):
        fn(None, [1.0, 2.0])
    assert calls == []
    fn(None, [1.0])
    assert calls == [[1.0]]
