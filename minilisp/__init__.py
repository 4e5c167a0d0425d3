# Core type aliases for minilisp's data model.
# Expressions are plain Python values (int, str, bool, tuple, Nil, Symbol);
# evaluation may additionally produce NativeFunction / UserFunction values.
#
# Naming guidance:
# - SExpression: use in reader code and special forms to denote syntactic forms.
# - LispValue:   use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable, Sequence

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Shape of a host-supplied built-in: evaluated arguments in, value out
NativeFn = Callable[[Sequence[LispValue]], LispValue]

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
