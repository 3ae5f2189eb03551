"""
  Chipmunk lexer

- Streaming: `lex` is a generator, `tokenize` collects it into a list
- Tracks 1-based line/column for every token and every error
- Comments are [ ... ], terminated by the first ] (no nesting)
- Strings decode three escapes (newline, double quote, backslash); any
  other backslash is kept as-is
"""

from __future__ import annotations

import math
import re
from typing import Iterator

from chipmunk.errors import NumberOutOfRange, UnknownCharacter, UnterminatedComment, UnterminatedString
from chipmunk.reader.tokens import Token, TokenKind


NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")  # a trailing '.' is left unconsumed
SYMBOL_RE = re.compile(r"_|[A-Za-z]+(?:-[A-Za-z]+)*")  # hyphens only between letters
OPERATOR_RE = re.compile(r"(?:[+*/<>=!]|-(?![0-9]))+")  # a run stops before a negative number

OPERATOR_CHARS = frozenset("+-*/<>=!")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    '"': '"',
    "\\": "\\",
}

STRUCTURAL: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "'": TokenKind.QUOTE_MARK,
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token objects until end of input."""
    pos = 0
    line = 1
    column = 1
    n = len(source)

    def advance(count: int = 1) -> str:
        nonlocal pos, line, column
        text = source[pos:pos + count]
        for char in text:
            if char == "\n":
                line += 1
                column = 1
            else:
                column += 1
        pos += count
        return text

    def skip_whitespace_and_comments() -> None:
        while pos < n:
            char = source[pos]
            if char.isspace():
                advance()
            elif char == "[":
                start_line, start_column = line, column
                end = source.find("]", pos)
                if end < 0:
                    raise UnterminatedComment(start_line, start_column)
                advance(end - pos + 1)
            else:
                break

    def read_match(pattern: re.Pattern) -> str:
        m = pattern.match(source, pos)
        return advance(m.end() - pos)

    def read_number() -> float:
        start_line, start_column = line, column
        text = read_match(NUMBER_RE)
        value = float(text)
        if math.isinf(value):
            raise NumberOutOfRange(text, start_line, start_column)
        return value

    def read_string() -> str:
        start_line, start_column = line, column
        advance()  # opening quote
        chars: list[str] = []
        while pos < n and source[pos] != '"':
            if source[pos] == "\\" and pos + 1 < n and source[pos + 1] in STRING_ESCAPES:
                chars.append(STRING_ESCAPES[source[pos + 1]])
                advance(2)
            else:
                chars.append(advance())
        if pos >= n:
            raise UnterminatedString(start_line, start_column)
        advance()  # closing quote
        return "".join(chars)

    while True:
        skip_whitespace_and_comments()
        if pos >= n:
            return

        char = source[pos]
        lookahead = source[pos + 1] if pos + 1 < n else ""
        tok_line, tok_column = line, column

        if _is_digit(char) or (char == "-" and _is_digit(lookahead)):
            yield Token(TokenKind.NUMBER, read_number(), tok_line, tok_column)
        elif _is_alpha(char) or char == "_":
            yield Token(TokenKind.SYMBOL, read_match(SYMBOL_RE), tok_line, tok_column)
        elif char in OPERATOR_CHARS:
            yield Token(TokenKind.SYMBOL, read_match(OPERATOR_RE), tok_line, tok_column)
        elif char == '"':
            yield Token(TokenKind.STRING, read_string(), tok_line, tok_column)
        elif char in STRUCTURAL:
            yield Token(STRUCTURAL[char], advance(), tok_line, tok_column)
        else:
            raise UnknownCharacter(char, tok_line, tok_column)


def tokenize(source: str) -> list[Token]:
    """Lex the whole of `source`; fails on the first lexical error."""
    return list(lex(source))
