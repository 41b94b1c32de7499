"""Core tree-walking evaluator for Egg.

Literals evaluate to themselves, identifiers are looked up through the scope
chain, and applications either dispatch to a special form (when the operator
is a reserved bare identifier) or evaluate operator and arguments and apply.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggTypeError
from egg.types.expression import Application, Expression, Identifier, Literal
from egg.types.scope import Scope
from egg.evaluation.apply import apply, is_applicable
from egg.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: Expression, scope: Scope) -> EggValue:
    match expr:
        case Literal(value=value):
            return value

        case Identifier(name=name):
            return scope.lookup(name)

        # --- Special forms: arguments are handed over unevaluated ---
        case Application(operator=Identifier(name=name), args=args) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](args, scope, evaluate)

        case Application(operator=operator, args=args):
            head = evaluate(operator, scope)
            if not is_applicable(head):
                raise EggTypeError(f"Applying a non-function: {head!r}")
            values = [evaluate(arg, scope) for arg in args]
            return apply(head, values, scope, evaluate)

    raise EggTypeError(f"Cannot evaluate {expr!r}")
