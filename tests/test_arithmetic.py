import pytest

from egg import Interpreter, run
from egg.errors import (
    EggArityError,
    EggIndexError,
    EggOverflowError,
    EggTypeError,
    EggZeroDivisionError,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+(1, 2)", 3),
        ("-(10, 3)", 7),
        ("-(3, 10)", -7),
        ("*(6, 7)", 42),
        ("/(12, 3)", 4),
        ("/(7, 2)", 3.5),
        ("+(*(2, 3), -(10, 4))", 12),
        ('+("egg", "shell")', "eggshell"),
        ("==(1, 1)", True),
        ("==(1, 2)", False),
        ('==("a", "a")', True),
        ('==(1, "1")', False),
        ("<(1, 2)", True),
        ("<(2, 1)", False),
        (">(2, 1)", True),
        (">(1, 1)", False),
        ('<("a", "b")', True),
    ],
)
def test_arithmetic_and_comparison(source, expected):
    assert run(source) == expected


def test_comparisons_return_booleans():
    assert run("<(1, 2)") is True
    assert run("==(1, 2)") is False


@pytest.mark.parametrize("source", ["+(1)", "+(1, 2, 3)", "*()", "==(1)", "<(1, 2, 3)"])
def test_operator_arity(source):
    with pytest.raises(EggArityError):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        '+(1, "a")',
        '-("a", "b")',
        '<(1, "a")',
        "*(array(), array())",
        '*("ab", 3)',
        "*(array(1), 3)",
        "+(array(1), array(2))",
        "+(true, true)",
        "-(true, 1)",
        "/(6, false)",
    ],
)
def test_operator_type_errors(source):
    with pytest.raises(EggTypeError):
        run(source)


def test_division_by_zero():
    with pytest.raises(EggZeroDivisionError):
        run("/(1, 0)")


@pytest.mark.parametrize("source", ["/(" + "9" * 400 + ", 1)", "+(" + "9" * 400 + ", /(1, 2))"])
def test_float_overflow(source):
    with pytest.raises(EggOverflowError) as excinfo:
        run(source)
    assert isinstance(excinfo.value.__cause__, OverflowError)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("==(array(1, 2), array(1, 2))", True),
        ("==(array(1), array(2))", False),
        ("==(1, true)", True),
        ("==(0, false)", True),
        ("==(2, true)", False),
    ],
)
def test_equality_uses_host_equality(source, expected):
    assert run(source) is expected


# -------------------------------
# Arrays
# -------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("array()", []),
        ('array(1, "two", array(3))', [1, "two", [3]]),
        ("length(array(1, 2, 3))", 3),
        ("length(array())", 0),
        ("element(array(10, 20, 30), 1)", 20),
        ("element(array(10, 20, 30), 0)", 10),
        ("element(array(10, 20, 30), /(4, 2))", 30),
    ],
)
def test_array_builtins(source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    ["element(array(), 0)", "element(array(1, 2), 2)", "element(array(1, 2), -(0, 1))"],
)
def test_element_out_of_range(source):
    with pytest.raises(EggIndexError):
        run(source)


@pytest.mark.parametrize(
    "source",
    ["length(1)", 'length("abc")', "element(1, 0)", 'element(array(1), "0")', "element(array(1), true)"],
)
def test_array_type_errors(source):
    with pytest.raises(EggTypeError):
        run(source)


def test_array_arity():
    with pytest.raises(EggArityError):
        run("length()")
    with pytest.raises(EggArityError):
        run("element(array(1))")


def test_arrays_are_shared_by_reference():
    interp = Interpreter(prelude=None)
    interp.eval("do(define(xs, array(1, 2)), define(ys, xs))")
    xs, ys = interp.scope.vars["xs"], interp.scope.vars["ys"]
    assert xs is ys
    xs.append(3)
    assert interp.eval("length(ys)") == 3
