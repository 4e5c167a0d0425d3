import logging
import sys

import pytest

from minilisp import config
from minilisp.interpreter import Interpreter


def test_int_bounds():
    assert config.int_bounds() == (-2**31, 2**31 - 1)
    assert config.int_bounds(8) == (-128, 127)


@pytest.mark.parametrize("raw, expected", [("", 10000), ("20000", 20000), ("abc", 10000), ("-5", 10000)])
def test_recursion_limit_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MINILISP_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


def test_interpreter_raises_recursion_limit():
    Interpreter()
    assert sys.getrecursionlimit() >= config.get_recursion_limit()


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "nonsense")
    assert config.get_log_level() == logging.WARNING
