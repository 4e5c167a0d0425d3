import pytest

from minilisp.errors import LispInvalidSymbol, LispUnboundSymbol
from minilisp.types.environment import ROOT


def test_define_and_lookup(env, table):
    x = table.sym_for("x")
    env.define(x, 42)
    assert env.lookup(x) == 42
    env.define(x, 43)
    assert env.lookup(x) == 43


def test_unbound_symbol(env, table):
    y = table.sym_for("y")
    with pytest.raises(LispUnboundSymbol) as ex:
        env.lookup(y)
    assert ex.value.symbol is y
    env.push_frame()
    with pytest.raises(LispUnboundSymbol):
        env.lookup(y)


def test_lookup_walks_to_parent(env, table):
    x = table.sym_for("x")
    env.define(x, 1)
    env.push_frame()
    env.push_frame()
    assert env.lookup(x) == 1


def test_define_only_touches_current_frame(env, table):
    x, z = table.sym_for("x"), table.sym_for("z")
    env.define(x, 1)
    env.push_frame()
    env.define(x, 2)
    env.define(z, 3)
    assert env.lookup(x) == 2
    env.pop_frame()
    assert env.lookup(x) == 1
    with pytest.raises(LispUnboundSymbol):
        env.lookup(z)


def test_define_root_from_child_frame(env, table):
    g = table.sym_for("g")
    env.push_frame()
    env.define_root(g, "global")
    env.pop_frame()
    assert env.lookup(g) == "global"


def test_frames_are_parented_at_current(env):
    outer = env.push_frame()
    assert env.frames[outer].parent == ROOT
    inner = env.push_frame()
    assert env.frames[inner].parent == outer
    assert env.current == inner
    env.pop_frame()
    assert env.current == outer
    env.pop_frame()
    assert env.current == ROOT
    assert env.depth == 1


def test_unwind_drops_frames_above_handle(env):
    outer = env.push_frame()
    env.push_frame()
    env.push_frame()
    env.unwind(outer)
    assert env.current == outer
    assert env.depth == 2
    env.unwind()
    assert env.current == ROOT
    assert env.depth == 1


def test_cannot_pop_root(env):
    with pytest.raises(RuntimeError):
        env.pop_frame()


def test_define_requires_symbol(env):
    with pytest.raises(LispInvalidSymbol):
        env.define("x", 1)


def test_str_and_repr(env, table):
    env.define(table.sym_for("a"), 1)
    env.define(table.sym_for("b"), "two")
    assert str(env) == "{a: 1, b: 'two'}"
    env.push_frame()
    assert str(env) == "{} -> ..."
    assert repr(env) == "<Environment chain: {} -> {a: 1, b: 'two'}>"
