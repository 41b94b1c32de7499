"""Syntax-tree nodes produced by the Egg reader.

Everything in Egg is an expression, and there are exactly three kinds:
literals (numbers and strings), identifiers, and applications. Nodes are
immutable once built. `pos` records the source offset where the node starts;
it is informational only and ignored by equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Literal:
    value: int | str
    pos: int = field(default=-1, compare=False, repr=False)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str
    pos: int = field(default=-1, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Application:
    operator: "Expression"
    args: tuple["Expression", ...] = ()
    pos: int = field(default=-1, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(a) for a in self.args)})"


Expression = Union[Literal, Identifier, Application]
