from __future__ import annotations

"""
Indexer for Egg documents that never evaluates code.

The document is parsed with the real Egg reader. On success we walk the tree
and record every define(name, ...) site; on failure we keep the syntax error
with its position so the server can publish it as a diagnostic.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

from egg.errors import EggSyntaxError
from egg.reader.parser import parse
from egg.types.expression import Application, Expression, Identifier

BUILTIN_SIGNATURES: Dict[str, str] = {
    "if": "if(test, then, else)",
    "while": "while(test, body)",
    "do": "do(expr...)",
    "define": "define(name, value)",
    "fun": "fun(param..., body)",
    "+": "+(a, b)",
    "-": "-(a, b)",
    "*": "*(a, b)",
    "/": "/(a, b)",
    "==": "==(a, b)",
    "<": "<(a, b)",
    ">": ">(a, b)",
    "print": "print(value)",
    "array": "array(value...)",
    "length": "length(array)",
    "element": "element(array, n)",
    "true": "true",
    "false": "false",
}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    error: Optional[SyntaxProblem] = None


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    col = offset - (text.rfind("\n", 0, offset) + 1)
    return line, col


def _walk(expr: Expression) -> Iterator[Expression]:
    yield expr
    if isinstance(expr, Application):
        yield from _walk(expr.operator)
        for arg in expr.args:
            yield from _walk(arg)


def _definition(expr: Expression) -> Optional[Tuple[Identifier, str]]:
    match expr:
        case Application(operator=Identifier(name="define"), args=(Identifier() as name, value)):
            is_fun = isinstance(value, Application) and value.operator == Identifier("fun")
            return name, "function" if is_fun else "var"
    return None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    if not text.strip():
        return idx

    try:
        tree = parse(text)
    except EggSyntaxError as e:
        line, col = position_from_offset(text, e.pos or 0)
        idx.error = SyntaxProblem(str(e), line, col)
        return idx

    for expr in _walk(tree):
        found = _definition(expr)
        if found is None:
            continue
        name, kind = found
        # first definition wins; later ones are redefinitions
        if name.name not in idx.symbols:
            line, col = position_from_offset(text, name.pos)
            idx.symbols[name.name] = SymbolDef(name.name, kind, line, col)
    return idx
