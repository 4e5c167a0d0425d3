from __future__ import annotations


class LispError(Exception):
    """ Base class for all minilisp errors"""
    pass


class LispParseError(LispError):
    """ Raised when source text is structurally invalid"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            super().__init__(f"{message} (line {line}, column {column})")
        else:
            super().__init__(message)


class LispEvalError(LispError):
    """ Base class for failures while evaluating a well-formed expression"""
    pass


class LispUnboundSymbol(LispEvalError):
    """ Raised when a symbol is not bound in any frame of the chain"""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"undefined symbol: {symbol}")


class LispNotAFunction(LispEvalError):
    """ Raised when the head of a call resolves to a non-function value"""


class LispInvalidSymbol(LispEvalError):
    """ Raised when a symbol is required but something else was found"""


class LispArityError(LispEvalError):
    """ Raised when a form or built-in receives too few or too many values"""


class LispTypeError(LispEvalError):
    """ Raised when a value of the wrong kind is passed or produced"""
