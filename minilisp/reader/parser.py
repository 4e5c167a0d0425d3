"""
  Lisp Reader

- Recursive descent over characters, one character of lookahead
- Emits Python primitives:

    - lists -> tuple
    - symbols -> Symbol, interned through the parser's SymbolTable
    - true / false -> bool
    - nil -> Nil
    - strings -> str (escapes: \\n \\t \\r \\" \\\\)
    - integers -> int, range-checked against the signed integer width

- Whitespace (space, tab, CR, LF) and `;` line comments are skipped between
  tokens.
- Any structural problem raises LispParseError carrying the line and column of
  the offending character; there is no recovery and no partial result.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from minilisp import SExpression
from minilisp.config import INT_BITS, int_bounds
from minilisp.errors import LispParseError
from minilisp.types.nil import Nil
from minilisp.types.symbol import SymbolTable

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n")
SYMBOL_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz")
DIGITS = frozenset("0123456789")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

LITERAL_NAMES: dict[str, SExpression] = {
    "true": True,
    "false": False,
    "nil": Nil,
}


def _esc(c: Optional[str]) -> str:
    if c is None:
        return "end of input"
    return repr(c)


class Parser:
    """Reads expressions from a character stream.

    `source` may be a string or any iterable of single characters.
    """

    def __init__(
        self,
        source: str | Iterable[str],
        table: SymbolTable,
        int_bits: int = INT_BITS,
    ):
        self.chars: Iterator[str] = iter(source)
        self.table = table
        self.buffer: Optional[str] = None
        self.line = 1
        self.column = 1
        _, self.max_int = int_bounds(int_bits)

    # --- character stream ---
    def peek(self) -> Optional[str]:
        if self.buffer is None:
            self.buffer = next(self.chars, None)
        return self.buffer

    def advance(self) -> Optional[str]:
        c = self.peek()
        self.buffer = None
        if c == "\n":
            self.line += 1
            self.column = 1
        elif c is not None:
            self.column += 1
        return c

    def error(self, message: str) -> LispParseError:
        return LispParseError(message, self.line, self.column)

    def expect(self, e: str) -> None:
        c = self.peek()
        if c != e:
            raise self.error(f"expected {e!r}, got {_esc(c)}")
        self.advance()

    def skip_ws(self) -> None:
        while True:
            c = self.peek()
            if c in WHITESPACE:
                self.advance()
            elif c == ";":
                while self.peek() not in (None, "\n"):
                    self.advance()
            else:
                return

    # --- grammar ---
    def parse_expr(self) -> SExpression:
        """sexp := list | string | symbol | integer"""
        c = self.peek()
        if c is None:
            raise self.error("end of input while expecting an expression")
        if c == "(":
            return self.parse_list()
        if c == '"':
            return self.parse_string()
        if c in SYMBOL_CHARS:
            return self.parse_symbol()
        if c in DIGITS:
            return self.parse_integer()
        raise self.error(f"expected LIST, STRING, SYMBOL or INTEGER, but found {c!r}")

    def parse_list(self) -> tuple:
        self.expect("(")
        self.skip_ws()
        items: list[SExpression] = []
        while self.peek() != ")":
            if self.peek() is None:
                raise self.error("end of input within list")
            items.append(self.parse_expr())
            self.skip_ws()
        self.expect(")")
        return tuple(items)

    def parse_symbol(self) -> SExpression:
        chars = []
        while self.peek() in SYMBOL_CHARS:
            chars.append(self.advance())
        name = "".join(chars)
        if name in LITERAL_NAMES:
            return LITERAL_NAMES[name]
        logger.debug("read symbol %s at %d:%d", name, self.line, self.column)
        return self.table.sym_for(name)

    def parse_string(self) -> str:
        self.expect('"')
        chars = []
        while True:
            c = self.advance()
            if c is None:
                raise self.error("end of input within string literal")
            if c == '"':
                break
            if c == "\\":
                line, column = self.line, self.column
                e = self.advance()
                if e is None:
                    raise self.error("end of input within string literal")
                if e not in ESCAPES:
                    raise LispParseError(f"invalid escape sequence '\\{e}'", line, column)
                chars.append(ESCAPES[e])
            else:
                chars.append(c)
        return "".join(chars)

    def parse_integer(self) -> int:
        value = 0
        while self.peek() in DIGITS:
            value = value * 10 + (ord(self.advance()) - ord("0"))
            if value > self.max_int:
                raise self.error("integer literal out of range")
        logger.debug("read integer %d", value)
        return value

    # --- entry points ---
    def _expect_end(self) -> None:
        self.skip_ws()
        c = self.peek()
        if c is not None:
            raise self.error(f"unexpected {c!r} after end of expression")

    def compilation_unit(self) -> tuple:
        """A single outer list whose elements are the top-level forms."""
        self.skip_ws()
        if self.peek() != "(":
            raise self.error(f"expected '(' to open the compilation unit, got {_esc(self.peek())}")
        try:
            unit = self.parse_list()
        except RecursionError:
            raise self.error("lists nested too deeply") from None
        self._expect_end()
        return unit

    def expression(self) -> SExpression:
        """Exactly one expression of any kind, surrounded by optional whitespace."""
        self.skip_ws()
        try:
            expr = self.parse_expr()
        except RecursionError:
            raise self.error("lists nested too deeply") from None
        self._expect_end()
        return expr


def read(source: str | Iterable[str], table: SymbolTable) -> tuple:
    """Parse a compilation unit: a tuple of top-level forms."""
    return Parser(source, table).compilation_unit()


def read_expression(source: str | Iterable[str], table: SymbolTable) -> SExpression:
    return Parser(source, table).expression()
