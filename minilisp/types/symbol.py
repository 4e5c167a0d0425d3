from __future__ import annotations


class Symbol:
    """An interned name. Compared by identity, never by spelling.

    Only a SymbolTable creates symbols, so two symbols are equal exactly when
    they came from the same table for the same name.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Registry of name -> Symbol for one program run. Grows, never shrinks."""

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def sym_for(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = self._symbols[name] = Symbol(name)
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
