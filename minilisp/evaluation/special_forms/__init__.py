"""Registry of special forms for the minilisp evaluator.

Special forms are keyed by Symbol, and symbols belong to one SymbolTable, so
the registry is built per table with `special_forms_for`. The evaluator
consults it before ordinary function application.
"""

from typing import Callable

from minilisp.types.symbol import Symbol, SymbolTable
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.let_form import let_form

SpecialForm = Callable[..., object]

SPECIAL_FORM_HANDLERS: dict[str, SpecialForm] = {
    "if": if_form,
    "lambda": lambda_form,
    "let": let_form,
}


def special_forms_for(table: SymbolTable) -> dict[Symbol, SpecialForm]:
    return {table.sym_for(name): handler for name, handler in SPECIAL_FORM_HANDLERS.items()}
