from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TokenKind(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    QUOTE_MARK = "'"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    # float for NUMBER, decoded text for STRING, the name for SYMBOL,
    # the character itself for structural tokens
    value: Union[float, str]
    line: int
    column: int
