"""Function values created by the `fun` special form."""

from __future__ import annotations

import logging

from egg import EggValue
from egg.errors import EggArityError
from egg.types.expression import Expression
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


class Closure:
    """A first-class function: parameter names, body, and defining scope.

    The defining scope is held by reference, so a later `define` in that
    scope is visible to the body when the closure runs.
    """

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: tuple[str, ...], body: Expression, scope: Scope):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        self.scope: Scope = scope
        logger.debug("Closure created: params=(%s) scope_id=%d", ", ".join(self.params), id(scope))

    def extend_scope(self, args: list[EggValue]) -> Scope:
        """Bind `args` to the parameters in a new child of the defining scope."""
        if len(args) != len(self.params):
            raise EggArityError(
                f"Wrong number of arguments: expected {len(self.params)}, got {len(args)}"
            )
        local = Scope(outer=self.scope)
        local.update(dict(zip(self.params, args)))
        return local

    def __str__(self) -> str:
        return f"fun({', '.join([*self.params, str(self.body)])})"

    def __repr__(self) -> str:
        return f"<Closure {self}>"
