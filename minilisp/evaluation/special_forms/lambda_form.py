from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispInvalidSymbol, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.function import UserFunction
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    forms: dict,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, kept unevaluated.
    # Nothing from `env` is captured.
    if not tail:
        raise LispArityError("'lambda' requires a parameter list")
    if len(tail) < 2:
        raise LispArityError("'lambda' requires a body")

    params = tail[0]
    if not isinstance(params, tuple):
        raise LispTypeError(f"'lambda' parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispInvalidSymbol(f"'lambda' parameter must be a symbol, got {p!r}")

    return UserFunction(params, tail[1])
