from __future__ import annotations


class Symbol:
    """
    A name as a Chipmunk value.

    Symbols are unique per name: `Symbol("x") is Symbol("x")`, so environment
    frames and `=` compare them by identity.
    """

    __slots__ = ("name",)
    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.name = name
            cls._table[name] = symbol
        return symbol

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
