"""Tree-diagram printer for Egg syntax trees.

    do(define(x, 10), print(x))

renders as

    do-|
       |-define-|
       |        |-x
       |        |-10
       |
       |-print-|
               |-x
"""

from __future__ import annotations

from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.expression import Application, Expression, Identifier, Literal

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_IDENTIFIER = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_LITERAL = "\033[92m"


def colorize(expr: Expression, text: str) -> str:
    if isinstance(expr, Identifier):
        color = COLOR_SPECIAL_FORM if expr.name in SPECIAL_FORMS else COLOR_IDENTIFIER
    elif isinstance(expr, Literal):
        color = COLOR_LITERAL
    else:
        return text
    return f"{color}{text}{RESET}"


def _tree_lines(expr: Expression, color: bool) -> list[str]:
    # Applications with no arguments or a computed operator stay inline.
    if not isinstance(expr, Application) or not expr.args or not isinstance(expr.operator, Identifier):
        text = str(expr)
        return [colorize(expr, text) if color else text]

    head = expr.operator.name
    lines = [f"{colorize(expr.operator, head) if color else head}-|"]
    pad = " " * (len(head) + 1)
    last = len(expr.args) - 1
    for i, arg in enumerate(expr.args):
        child = _tree_lines(arg, color)
        lines.append(f"{pad}|-{child[0]}")
        rail = " " if i == last else "|"
        lines.extend(f"{pad}{rail} {line}".rstrip() for line in child[1:])
        if len(child) > 1 and i != last:
            lines.append(f"{pad}|")
    return lines


def format_tree(expr: Expression, color: bool = False) -> str:
    return "\n".join(_tree_lines(expr, color))


def pprint(expr: Expression, color: bool = False) -> None:
    print(format_tree(expr, color))
