from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.closure import Closure
from egg.types.expression import Expression, Identifier
from egg.types.scope import Scope


def fun_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # fun(p1, ..., pn, body): every argument but the last names a parameter.
    if not args:
        raise EggSyntaxError("Functions need a body")

    *param_exprs, body = args
    params = []
    for expr in param_exprs:
        if not isinstance(expr, Identifier):
            raise EggSyntaxError("Parameter names must be valid identifiers")
        params.append(expr.name)

    return Closure(tuple(params), body, scope)
