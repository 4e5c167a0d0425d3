"""Function values produced by evaluation.

The variant set is closed: a callable value is either a NativeFunction supplied
by the host or a UserFunction built by the `lambda` special form. The evaluator
matches on these two classes and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO

from minilisp import SExpression, NativeFn
from minilisp.types.symbol import Symbol


@dataclass(frozen=True)
class NativeFunction:
    """A built-in: receives the evaluated arguments, returns a value."""

    name: Symbol
    code: NativeFn

    def __str__(self) -> str:
        return f"<native {self.name}>"


@dataclass(frozen=True)
class UserFunction:
    """A function defined in source text.

    Only the parameter list and body are kept. The defining environment is not
    captured: a call's frame is parented at the caller's current frame.
    """

    params: tuple[Symbol, ...]
    body: SExpression

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()


Function = NativeFunction | UserFunction
