from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.expression import Expression
from egg.types.scope import Scope


def while_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2:
        raise EggSyntaxError("Wrong number of arguments to while")

    test, body = args
    while evaluate_fn(test, scope) is not False:
        evaluate_fn(body, scope)

    # Egg has no "nothing" value; a loop produces false.
    return False
