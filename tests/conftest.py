import io

import pytest

from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment
from minilisp.types.symbol import SymbolTable


@pytest.fixture
def table():
    return SymbolTable()


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def interp(out):
    """Fresh interpreter with builtins loaded, println captured in `out`."""
    return Interpreter(output=out)
