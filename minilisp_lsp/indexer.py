"""
Lightweight indexer for minilisp files without evaluating code.

The buffer is run through the real reader to find the first parse error (if
any), and scanned with a regular expression for `(let name ...)` definitions so
that partial or broken buffers still yield symbols for completion and hover.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from minilisp.errors import LispParseError
from minilisp.reader.parser import Parser
from minilisp.types.symbol import SymbolTable

LET_REGEX = re.compile(r"\(\s*let\s+([a-z]+)\s*(\(\s*lambda\s*\(([a-z\s]*)\))?")

BUILTIN_SIGNATURES: Dict[str, str] = {
    "println": "(println value...) -> nil",
    "plus": "(plus a b) -> integer",
    "minus": "(minus a b) -> integer",
    "mul": "(mul a b) -> integer",
    "div": "(div a b) -> integer",
    "lt": "(lt a b) -> boolean",
    "le": "(le a b) -> boolean",
    "gt": "(gt a b) -> boolean",
    "ge": "(ge a b) -> boolean",
    "not": "(not b) -> boolean",
    "if": "(if condition then else) -> value",
    "lambda": "(lambda (params) body) -> function",
    "let": "(let name value) -> nil",
}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int
    params: Optional[str] = None


@dataclass
class ParseDiagnostic:
    message: str
    line: int  # 0-based
    col: int  # 0-based


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    error: Optional[ParseDiagnostic] = None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start


def check_syntax(text: str) -> Optional[ParseDiagnostic]:
    """Parse `text` as a compilation unit; report the first error, if any."""
    if not text.strip():
        return None
    try:
        Parser(text, SymbolTable()).compilation_unit()
    except LispParseError as ex:
        return ParseDiagnostic(ex.message, (ex.line or 1) - 1, (ex.column or 1) - 1)
    return None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex(error=check_syntax(text))
    for m in LET_REGEX.finditer(text):
        name = m.group(1)
        line, col = _position_from_offset(text, m.start(1))
        if m.group(2):
            params = " ".join(m.group(3).split())
            idx.symbols[name] = SymbolDef(name, "function", line, col, params)
        else:
            idx.symbols[name] = SymbolDef(name, "var", line, col)
    return idx
