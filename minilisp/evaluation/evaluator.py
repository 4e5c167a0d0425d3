"""Core evaluator for the minilisp interpreter.

Walks an expression tree against the Environment's current frame:
- literals (int, str, bool, nil) evaluate to themselves,
- a Symbol evaluates to its binding,
- a list is a special form or a call; its head must be a Symbol.

Evaluation errors are raised as LispEvalError subclasses and never caught here.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.errors import LispEvalError, LispInvalidSymbol, LispNotAFunction
from minilisp.evaluation.apply import apply
from minilisp.printer import render
from minilisp.types.environment import Environment
from minilisp.types.function import Function
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment, forms: dict) -> LispValue:
    """Evaluate `expr` in the current frame of `env`.

    `forms` maps the reserved Symbols of the program's SymbolTable to their
    special-form handlers (see special_forms_for).
    """
    match expr:
        case tuple():
            if not expr:
                raise LispEvalError("tried to invoke empty list")
            head, *tail = expr
            if not isinstance(head, Symbol):
                raise LispInvalidSymbol(f"expected symbol, found {render(head, readable=True)}")

            handler = forms.get(head)
            if handler is not None:
                return handler(tail, env, forms, evaluate)

            fn = env.lookup(head)
            if not isinstance(fn, Function):
                raise LispNotAFunction(f"not a function: {head} is {render(fn, readable=True)}")

            # Strict left-to-right argument evaluation
            args = [evaluate(arg, env, forms) for arg in tail]
            logger.debug("apply %s to %d argument(s)", head, len(args))
            return apply(fn, args, env, forms, evaluate)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms return as-is ---
    return expr


def evaluate_unit(unit: tuple, env: Environment, forms: dict) -> LispValue:
    """Evaluate each top-level form in turn; only the last result is returned."""
    result: LispValue = Nil
    for form in unit:
        result = evaluate(form, env, forms)
    return result
