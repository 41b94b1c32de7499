"""Application engine for Egg.

Centralizes function application semantics for the interpreter:
- Closures created by `fun` get a fresh scope chained to their defining
  scope, and their body is evaluated there.
- Builtin Python callables registered in the root scope are invoked with the
  calling scope and the list of evaluated arguments.

Keeping this logic in one place prevents duplication between the evaluator
and the special forms.
"""

from __future__ import annotations

import logging
from typing import Callable

from egg import EggValue, EvaluatorFn
from egg.errors import EggTypeError
from egg.types.closure import Closure
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


def is_applicable(value: EggValue) -> bool:
    return isinstance(value, Closure) or callable(value)


def apply_closure(fn: Closure, args: list[EggValue], evaluate_fn: EvaluatorFn) -> EggValue:
    """Call an Egg closure with already-evaluated arguments.

    The new scope's parent is the closure's captured scope, never the
    caller's, so free names in the body resolve lexically.
    """
    local = fn.extend_scope(args)
    logger.debug("Calling %s in scope_id=%d", fn, id(local))
    return evaluate_fn(fn.body, local)


def apply(
    head: Closure | Callable[[Scope, list[EggValue]], EggValue] | object,
    args: list[EggValue],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply either a Closure or a builtin callable; anything else is an error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif callable(head):
        return head(scope, args)
    else:
        raise EggTypeError(f"Applying a non-function: {head!r}")
