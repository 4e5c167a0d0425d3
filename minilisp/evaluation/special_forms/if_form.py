from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    forms: dict,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if condition then [else])
    The condition must evaluate to a boolean; a false condition without an
    else-branch yields nil.
    """
    if len(tail) < 2:
        raise LispArityError("too few values for 'if' expression")

    cond = evaluate_fn(tail[0], env, forms)
    if not isinstance(cond, bool):
        raise LispTypeError("'if' condition must be a boolean value")

    if cond:
        return evaluate_fn(tail[1], env, forms)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, forms)
    else:
        return Nil
