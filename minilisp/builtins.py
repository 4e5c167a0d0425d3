"""The fixed table of native built-ins.

Each built-in takes the list of evaluated arguments and checks its own arity
and argument types. Integer results wrap to the 32-bit signed width.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TextIO, TYPE_CHECKING

from minilisp import LispValue
from minilisp.config import INT_BITS
from minilisp.errors import LispArityError, LispTypeError
from minilisp.printer import render
from minilisp.types.nil import Nil

if TYPE_CHECKING:
    from minilisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _is_int(v: LispValue) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def wrap(n: int, bits: int = INT_BITS) -> int:
    """Two's-complement wrap of `n` into a signed integer of `bits` width."""
    mask = (1 << bits) - 1
    n &= mask
    return n - (1 << bits) if n >> (bits - 1) else n


def _check_arity(name: str, args: Sequence[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise LispArityError(f"'{name}' expected {n} {plural}, got {len(args)}")


def _int_args(name: str, args: Sequence[LispValue]) -> tuple[int, int]:
    _check_arity(name, args, 2)
    a, b = args
    if not (_is_int(a) and _is_int(b)):
        raise LispTypeError(f"invalid arguments for '{name}': expected integers")
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def plus(args: Sequence[LispValue]) -> int:
    a, b = _int_args("plus", args)
    return wrap(a + b)


def minus(args: Sequence[LispValue]) -> int:
    a, b = _int_args("minus", args)
    return wrap(a - b)


def mul(args: Sequence[LispValue]) -> int:
    a, b = _int_args("mul", args)
    return wrap(a * b)


def div(args: Sequence[LispValue]) -> int:
    a, b = _int_args("div", args)
    if b == 0:
        raise LispTypeError("division by zero in 'div'")
    # Truncate toward zero
    q = abs(a) // abs(b)
    return wrap(q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Comparison / logic
# -------------------------------
def lt(args: Sequence[LispValue]) -> bool:
    a, b = _int_args("lt", args)
    return a < b


def le(args: Sequence[LispValue]) -> bool:
    a, b = _int_args("le", args)
    return a <= b


def gt(args: Sequence[LispValue]) -> bool:
    a, b = _int_args("gt", args)
    return a > b


def ge(args: Sequence[LispValue]) -> bool:
    a, b = _int_args("ge", args)
    return a >= b


def not_(args: Sequence[LispValue]) -> bool:
    _check_arity("not", args, 1)
    if not isinstance(args[0], bool):
        raise LispTypeError("invalid arguments for 'not': expected a boolean")
    return not args[0]


# -------------------------------
# Output
# -------------------------------
def make_println(stream: Callable[[], TextIO]) -> Callable[[Sequence[LispValue]], LispValue]:
    def println(args: Sequence[LispValue]) -> LispValue:
        out = stream()
        out.write(" ".join(render(a) for a in args))
        out.write("\n")
        return Nil
    return println


BUILTINS: dict[str, Callable[[Sequence[LispValue]], LispValue]] = {
    "plus": plus,
    "minus": minus,
    "mul": mul,
    "div": div,
    "lt": lt,
    "le": le,
    "gt": gt,
    "ge": ge,
    "not": not_,
}


def register(interpreter: Interpreter) -> None:
    """Bind every built-in in the interpreter's root frame."""
    for name, fn in BUILTINS.items():
        interpreter.register_native(name, fn)
    interpreter.register_native("println", make_println(lambda: interpreter.output))
    logger.debug("registered %d built-ins", len(BUILTINS) + 1)
