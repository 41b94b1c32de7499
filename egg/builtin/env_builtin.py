"""Built-in functions for the Egg root scope.

This module defines the boolean constants, arithmetic and comparison
operators, output, and array helpers exposed to Egg programs, plus the
registration helper that installs them into a scope.

Every builtin takes the calling scope and the list of evaluated arguments.
"""
from __future__ import annotations

import operator
import sys
from typing import Callable

from egg import EggValue
from egg.errors import (
    EggArityError,
    EggIndexError,
    EggOverflowError,
    EggTypeError,
    EggZeroDivisionError,
)
from egg.types.closure import Closure
from egg.types.scope import Scope


def _expect_args(name: str, args: list[EggValue], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise EggArityError(f"{name} requires exactly {count} {noun}, got {len(args)}")


def _operand_error(name: str, a: EggValue, b: EggValue) -> EggTypeError:
    return EggTypeError(
        f"Unsupported operand types for {name}: {to_string(a, True)} and {to_string(b, True)}"
    )


def _binary(name: str, op: Callable[[EggValue, EggValue], EggValue], args: list[EggValue]) -> EggValue:
    _expect_args(name, args, 2)
    a, b = args
    try:
        return op(a, b)
    except TypeError as e:
        raise _operand_error(name, a, b) from e
    except OverflowError as e:
        raise EggOverflowError(f"Result of {name} is too large") from e


# -------------------------------
# Arithmetic
# -------------------------------
def _is_number(value: EggValue) -> bool:
    # bool is an int subclass, but true and false are not numbers in Egg
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _arithmetic(name: str, op: Callable[[EggValue, EggValue], EggValue], args: list[EggValue],
                strings: bool = False) -> EggValue:
    _expect_args(name, args, 2)
    a, b = args
    if not (_is_number(a) and _is_number(b)):
        if not (strings and isinstance(a, str) and isinstance(b, str)):
            raise _operand_error(name, a, b)
    return _binary(name, op, args)


def add(scope: Scope, args: list[EggValue]) -> EggValue:
    """Numeric addition, or concatenation of two strings."""
    return _arithmetic("+", operator.add, args, strings=True)


def sub(scope: Scope, args: list[EggValue]) -> EggValue:
    return _arithmetic("-", operator.sub, args)


def mul(scope: Scope, args: list[EggValue]) -> EggValue:
    return _arithmetic("*", operator.mul, args)


def div(scope: Scope, args: list[EggValue]) -> EggValue:
    """True division; a zero divisor is an evaluation error."""
    try:
        return _arithmetic("/", operator.truediv, args)
    except ZeroDivisionError as e:
        raise EggZeroDivisionError("Division by zero") from e


# -------------------------------
# Comparison
# -------------------------------
def equals(scope: Scope, args: list[EggValue]) -> bool:
    """Host equality: arrays compare by contents, and true == 1."""
    return _binary("==", operator.eq, args)


def lt(scope: Scope, args: list[EggValue]) -> bool:
    return _binary("<", operator.lt, args)


def gt(scope: Scope, args: list[EggValue]) -> bool:
    return _binary(">", operator.gt, args)


# -------------------------------
# Output
# -------------------------------
def to_string(value: EggValue, nested: bool = False) -> str:
    """Egg's textual form of a value.

    Strings print verbatim at the top level and quoted inside arrays, so
    array("1") and array(1) stay distinguishable.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return "[" + ", ".join(to_string(v, True) for v in value) + "]"
    if isinstance(value, Closure):
        return str(value)
    if callable(value):
        name = next((n for n, fn in BUILTIN_FUNCTIONS.items() if fn is value), value.__name__)
        return f"<builtin {name}>"
    return str(value)


def print_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
    """Print one value followed by a newline; returns the value unchanged."""
    _expect_args("print", args, 1)
    value = args[0]
    print(to_string(value), file=sys.stdout)
    return value


# -------------------------------
# Arrays
# -------------------------------
def array(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    return list(args)


def _expect_array(name: str, value: EggValue) -> list[EggValue]:
    if not isinstance(value, list):
        raise EggTypeError(f"{name} expects an array, got {to_string(value, True)}")
    return value


def length(scope: Scope, args: list[EggValue]) -> int:
    _expect_args("length", args, 1)
    return len(_expect_array("length", args[0]))


def element(scope: Scope, args: list[EggValue]) -> EggValue:
    """element(array, n): the n-th item, counting from zero.

    Negative or too-large indexes are errors rather than Python's
    wrap-around indexing.
    """
    _expect_args("element", args, 2)
    items = _expect_array("element", args[0])
    n = args[1]
    if isinstance(n, float) and n.is_integer():
        n = int(n)
    if isinstance(n, bool) or not isinstance(n, int):
        raise EggTypeError(f"element index must be an integer, got {to_string(n, True)}")
    if not 0 <= n < len(items):
        raise EggIndexError(f"Index {n} out of range for array of length {len(items)}")
    return items[n]


BUILTIN_FUNCTIONS: dict[str, Callable[[Scope, list[EggValue]], EggValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "==": equals,
    "<": lt,
    ">": gt,
    "print": print_builtin,
    "array": array,
    "length": length,
    "element": element,
}


def register(scope: Scope) -> None:
    """Register all builtin functions and constants into the given scope."""
    scope.update(BUILTIN_FUNCTIONS)
    # Egg has no boolean syntax; true and false are ordinary bindings.
    scope.define("true", True)
    scope.define("false", False)
