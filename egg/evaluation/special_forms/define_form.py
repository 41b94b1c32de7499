from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Expression, Identifier
from egg.types.scope import Scope


def define_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds in the scope it is evaluated in, even when an outer scope already
    has `name`. Returns the bound value.
    """
    if len(args) != 2 or not isinstance(args[0], Identifier):
        raise EggSyntaxError("Incorrect use of define")

    name, val_expr = args
    value = evaluate_fn(val_expr, scope)
    scope.define(name.name, value)
    return value
