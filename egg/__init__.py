# Core type aliases for Egg's data model.
# Runtime values are plain Python objects: int/float, str, bool, list (Egg arrays),
# Closure instances and builtin callables. Egg has no null; "no value" is False.
#
# Naming guidance:
# - Expression: Use in reader/evaluator code for parsed syntax-tree nodes.
# - EggValue:   Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: passed to special forms so they control evaluation
EvaluatorFn = Callable[..., EggValue]

from egg.interpreter import Interpreter, run  # noqa: E402

__all__ = [
    "EggValue",
    "EvaluatorFn",
    "Interpreter",
    "run",
]
