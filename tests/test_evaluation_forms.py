import pytest

from minilisp.errors import LispArityError, LispInvalidSymbol, LispTypeError
from minilisp.types.nil import Nil


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if (lt 1 2) \"yes\" \"no\")", "yes"),
        ("(if (not (lt 1 2)) \"yes\" \"no\")", "no"),
        ("(if true (if false 1 2) 3)", 2),
    ],
)
def test_if_expression(interp, source, expected):
    assert interp.eval_expression(source) == expected


def test_if_without_else(interp):
    assert interp.eval_expression("(if false 1)") is Nil
    assert interp.eval_expression("(if true 1)") == 1


def test_if_only_evaluates_taken_branch(interp, out):
    assert interp.eval_expression('(if true 1 (println "no"))') == 1
    assert interp.eval_expression('(if false (println "no") 2)') == 2
    assert out.getvalue() == ""


@pytest.mark.parametrize("cond", ["1", '"true"', "nil", "(lambda (x) x)"])
def test_if_condition_must_be_boolean(interp, cond):
    with pytest.raises(LispTypeError) as ex:
        interp.eval_expression(f"(if {cond} 1 2)")
    assert "'if' condition must be a boolean value" in str(ex.value)


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if false)"])
def test_if_too_few_values(interp, source):
    with pytest.raises(LispArityError) as ex:
        interp.eval_expression(source)
    assert "too few values for 'if' expression" in str(ex.value)


# ------------------ lambda ------------------

def test_lambda_with_no_parameters(interp):
    assert interp.eval("((let k (lambda () 9)) (k))") == 9


def test_lambda_body_is_not_evaluated_at_definition(interp):
    # nosuch is only looked up when the function is called
    interp.eval("((let f (lambda () (nosuch))))")


@pytest.mark.parametrize(
    "source, error",
    [
        ("(lambda)", LispArityError),
        ("(lambda (x))", LispArityError),
        ("(lambda x x)", LispTypeError),
        ("(lambda (x 1) x)", LispInvalidSymbol),
        ('(lambda ("x") x)', LispInvalidSymbol),
        ("(lambda ((x)) x)", LispInvalidSymbol),
    ],
)
def test_malformed_lambda(interp, source, error):
    with pytest.raises(error):
        interp.eval_expression(source)


# ------------------ let ------------------

def test_let_returns_nil_and_binds(interp):
    assert interp.eval_expression("(let x (plus 1 2))") is Nil
    assert interp.eval_expression("x") == 3


def test_let_overwrites_in_current_frame(interp):
    assert interp.eval("((let x 1) (let x 2) x)") == 2


@pytest.mark.parametrize(
    "source, error",
    [
        ("(let)", LispArityError),
        ("(let x)", LispArityError),
        ("(let 1 2)", LispInvalidSymbol),
        ('(let "x" 2)', LispInvalidSymbol),
        ("(let (x) 2)", LispInvalidSymbol),
    ],
)
def test_malformed_let(interp, source, error):
    with pytest.raises(error):
        interp.eval_expression(source)


def test_special_forms_take_priority_over_bindings(interp):
    interp.eval_expression("(let if 1)")
    assert interp.eval_expression("(if true 1 2)") == 1
