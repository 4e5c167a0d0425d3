"""Rendering of minilisp values to text."""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.function import NativeFunction, UserFunction
from minilisp.types.nil import NilType
from minilisp.types.symbol import Symbol

_UNESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(s: str) -> str:
    return '"' + "".join(_UNESCAPES.get(c, c) for c in s) + '"'


def render(value: LispValue, readable: bool = False) -> str:
    """Text form of a value.

    With `readable=True` strings are quoted and re-escaped so that the reader
    would accept the output again.
    """
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return _quote(value) if readable else value
        case NilType():
            return "nil"
        case Symbol():
            return value.name
        case tuple():
            return "(" + " ".join(render(v, readable) for v in value) + ")"
        case NativeFunction() | UserFunction():
            return str(value)
    return repr(value)
