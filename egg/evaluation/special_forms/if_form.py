from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Expression
from egg.types.scope import Scope


def if_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    if(test, then, else)
    Only the boolean False selects the else branch; 0, "" and empty arrays
    are all true. The branch not taken is never evaluated.
    """
    if len(args) != 3:
        raise EggSyntaxError("Wrong number of arguments to if")

    test, then_expr, else_expr = args
    if evaluate_fn(test, scope) is not False:
        return evaluate_fn(then_expr, scope)
    return evaluate_fn(else_expr, scope)
