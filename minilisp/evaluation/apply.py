"""Application engine for minilisp.

Function values form a closed variant, so application is a single match:
- NativeFunction: the host callable receives the evaluated arguments and is
  responsible for its own arity and type checks.
- UserFunction: a new frame parented at the caller's current frame is pushed,
  parameters are paired positionally with arguments, the body is evaluated,
  and the caller's frame is restored whether or not the body fails.
"""

from __future__ import annotations

import logging

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import LispNotAFunction
from minilisp.types.environment import Environment
from minilisp.types.function import NativeFunction, UserFunction

logger = logging.getLogger(__name__)


def apply_user_function(
    fn: UserFunction,
    args: list[LispValue],
    env: Environment,
    forms: dict,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # zip() truncates: surplus arguments are dropped, surplus parameters stay unbound.
    if len(args) != len(fn.params):
        logger.debug("%s called with %d argument(s) for %d parameter(s)", fn, len(args), len(fn.params))
    env.push_frame()
    try:
        for param, arg in zip(fn.params, args):
            env.define(param, arg)
        return evaluate_fn(fn.body, env, forms)
    finally:
        env.pop_frame()


def apply(
    fn: NativeFunction | UserFunction | object,
    args: list[LispValue],
    env: Environment,
    forms: dict,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    match fn:
        case NativeFunction(code=code):
            return code(args)
        case UserFunction():
            return apply_user_function(fn, args, env, forms, evaluate_fn)
        case _:
            raise LispNotAFunction(f"not a function: {fn!r}")
