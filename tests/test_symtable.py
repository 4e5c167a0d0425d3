from hypothesis import given, strategies as st

from minilisp.types.symbol import Symbol, SymbolTable


def test_interning_is_idempotent(table):
    foo = table.sym_for("foo")
    bar = table.sym_for("bar")
    assert foo == table.sym_for("foo")
    assert foo is table.sym_for("foo")
    assert bar == table.sym_for("bar")
    assert foo != bar


def test_tables_are_disjoint(table):
    other = SymbolTable()
    assert table.sym_for("foo") != other.sym_for("foo")


def test_table_grows_monotonically(table):
    assert len(table) == 0
    table.sym_for("a")
    table.sym_for("b")
    table.sym_for("a")
    assert len(table) == 2
    assert "a" in table
    assert "c" not in table


def test_symbol_str_and_repr(table):
    s = table.sym_for("plus")
    assert str(s) == "plus"
    assert repr(s) == "Symbol('plus')"
    # Same spelling, different identity
    assert Symbol("plus") != s


@given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12))
def test_same_name_same_symbol(name):
    t = SymbolTable()
    assert t.sym_for(name) is t.sym_for(name)
    assert t.sym_for(name) != SymbolTable().sym_for(name)
