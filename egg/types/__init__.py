from egg.types.expression import Application, Expression, Identifier, Literal
from egg.types.scope import Scope
from egg.types.closure import Closure

__all__ = [
    "Application",
    "Closure",
    "Expression",
    "Identifier",
    "Literal",
    "Scope",
]
