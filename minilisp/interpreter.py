from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from minilisp import LispValue, NativeFn, SExpression
from minilisp.config import get_recursion_limit
from minilisp.errors import LispEvalError
from minilisp.evaluation.evaluator import evaluate, evaluate_unit
from minilisp.evaluation.special_forms import special_forms_for
from minilisp.reader.parser import Parser
from minilisp.types.environment import Environment
from minilisp.types.function import NativeFunction
from minilisp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns everything one program run needs: the SymbolTable shared by reader
    and evaluator, the Environment frame stack, and the special-form registry.
    Bindings made by `let` at top level persist across calls to `eval`.
    """

    def __init__(self, output: TextIO | None = None, builtins: bool = True):
        self.table = SymbolTable()
        self.env = Environment()
        self.forms = special_forms_for(self.table)
        self._output = output

        # Each nested call costs several Python frames
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        if builtins:
            from minilisp.builtins import register
            register(self)

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def sym_for(self, name: str) -> Symbol:
        return self.table.sym_for(name)

    def register_native(self, name: str | Symbol, code: NativeFn) -> NativeFunction:
        """Bind a host callable `(args) -> value` under `name` in the root frame."""
        sym = name if isinstance(name, Symbol) else self.table.sym_for(name)
        fn = NativeFunction(sym, code)
        self.env.define_root(sym, fn)
        return fn

    def parse(self, code: str) -> tuple:
        return Parser(code, self.table).compilation_unit()

    def parse_expression(self, code: str) -> SExpression:
        return Parser(code, self.table).expression()

    def _run(self, expr: SExpression, unit: bool) -> LispValue:
        base = self.env.current
        try:
            if unit:
                return evaluate_unit(expr, self.env, self.forms)
            return evaluate(expr, self.env, self.forms)
        except RecursionError:
            self.env.unwind(base)
            raise LispEvalError("maximum recursion depth exceeded") from None

    def eval(self, code: str) -> LispValue:
        """Evaluate a compilation unit; returns the value of its last form."""
        unit = self.parse(code)
        logger.info("evaluating %d top-level form(s)", len(unit))
        return self._run(unit, unit=True)

    def eval_expression(self, code: str) -> LispValue:
        return self._run(self.parse_expression(code), unit=False)

    def read_file(self, path: str | Path) -> str:
        """Source text of `path`; raises OSError or UnicodeDecodeError."""
        return Path(path).read_text(encoding="utf-8")

    def run_file(self, path: str | Path) -> LispValue:
        source = self.read_file(path)
        logger.info("running %s", path)
        return self.eval(source)
