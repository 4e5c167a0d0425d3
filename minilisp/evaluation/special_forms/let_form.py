from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispInvalidSymbol
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    forms: dict,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Binds in the current frame; it does not open a new scope.
    """
    if not tail:
        raise LispArityError("'let' requires a name")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise LispInvalidSymbol(f"'let' name must be a symbol, got {name!r}")
    if len(tail) < 2:
        raise LispArityError("'let' requires a value expression")

    value = evaluate_fn(tail[1], env, forms)
    env.define(name, value)
    return Nil
