"""Exception hierarchy for Chipmunk.

Every stage raises a subclass of ChipmunkError so a REPL can catch one
top-level evaluation's failure and carry on with the next input.
"""

from __future__ import annotations


class ChipmunkError(Exception):
    """ Base class for all Chipmunk errors"""
    pass


# -------------------------------
# Lexing
# -------------------------------
class LexError(ChipmunkError):
    """ Raised when source text cannot be split into tokens"""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} ({line}:{column})")
        self.line = line
        self.column = column


class UnknownCharacter(LexError):
    """ Raised on a character that starts no token"""

    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"unknown character: {char}", line, column)
        self.char = char


class UnterminatedComment(LexError):
    """ Raised when a [ comment reaches end of input; position is the opening ["""

    def __init__(self, line: int, column: int):
        super().__init__("unterminated comment", line, column)


class UnterminatedString(LexError):
    """ Raised when a string reaches end of input; position is the opening quote"""

    def __init__(self, line: int, column: int):
        super().__init__("unterminated string", line, column)


class NumberOutOfRange(LexError):
    """ Raised on a number literal too large to read as a finite float"""

    def __init__(self, text: str, line: int, column: int):
        super().__init__(f"number out of range: {text}", line, column)
        self.text = text


# -------------------------------
# Parsing
# -------------------------------
class ParseError(ChipmunkError):
    """ Raised when tokens do not form an expression"""


class UnexpectedToken(ParseError):
    """ Raised when a token cannot appear where it was found"""

    def __init__(self, expected: str, token):
        super().__init__(
            f"expected {expected}, found {token.value!r} ({token.line}:{token.column})"
        )
        self.expected = expected
        self.token = token


class UnexpectedEndOfInput(ParseError):
    """ Raised when input ends in the middle of an expression"""

    def __init__(self, expected: str):
        super().__init__(f"expected {expected}, found end of input")
        self.expected = expected


class NestingTooDeep(ParseError):
    """ Raised when an expression is nested beyond the parser's depth limit"""

    def __init__(self, limit: int):
        super().__init__(f"expression nested more than {limit} levels deep")
        self.limit = limit


# -------------------------------
# Evaluation
# -------------------------------
def _describe(value) -> str:
    from chipmunk.printer import render
    return render(value)


class EvalError(ChipmunkError):
    """ Base class for errors raised while evaluating"""


class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name):
        super().__init__(f"unbound symbol: {_describe(name)}")
        self.name = name


class WrongArity(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name, expected: str, actual: int):
        super().__init__(f"{_describe(name)}: expected {expected} argument(s), got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class TypeMismatch(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, name, expected: str, actual):
        super().__init__(f"{_describe(name)}: expected {expected}, got {_describe(actual)}")
        self.name = name
        self.expected = expected
        self.actual = actual


class NotCallable(EvalError):
    """ Raised when the operator position does not hold a function"""

    def __init__(self, value):
        super().__init__(f"not callable: {_describe(value)}")
        self.value = value


class StackExhausted(EvalError):
    """ Raised when evaluation nests deeper than the configured limit"""

    def __init__(self, limit: int):
        super().__init__(f"stack exhausted: evaluation deeper than {limit} levels")
        self.limit = limit


class DivisionByZero(EvalError):
    """ Raised when / is given a zero divisor"""

    def __init__(self, name):
        super().__init__(f"{_describe(name)}: division by zero")
        self.name = name


# -------------------------------
# Compilation
# -------------------------------
class CompileError(ChipmunkError):
    """ Raised when a form has no JavaScript translation"""
