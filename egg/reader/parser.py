"""
  Egg Reader

- Scannerless: three regular expressions recognise the atomic forms directly
  on the source text, there is no separate token stream.
- Emits immutable syntax-tree nodes:

    - "abc"      -> Literal("abc")     (no escape processing)
    - 42         -> Literal(42)
    - name       -> Identifier("name")
    - f(a, b)    -> Application(Identifier("f"), (a, b))
    - f(1)(2)    -> Application(Application(f, (1,)), (2,))

A whole program is a single expression; `do(...)` is how statements are
sequenced.
"""

from __future__ import annotations

import logging
import re

from egg.errors import EggSyntaxError
from egg.types.expression import Application, Expression, Identifier, Literal

logger = logging.getLogger(__name__)


STRING_RE = re.compile(r'"([^"]*)"')
# \b is ASCII so that "12abc" is read as an identifier, not a number.
NUMBER_RE = re.compile(r"\d+\b", re.ASCII)
IDENTIFIER_RE = re.compile(r'[^\s(),#"]+')
NON_SPACE_RE = re.compile(r"\S")

EMPTY_INPUT = "you typed nothing"


class Reader:
    """Recursive-descent reader over a source string.

    `parse_expr` reads one atom and hands it to `parse_apply`, which keeps
    wrapping it in applications for as long as a `(` follows. Arguments are
    read through `parse_expr` again, so the two methods recurse into each
    other.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def skip_space(self) -> None:
        match = NON_SPACE_RE.search(self.source, self.pos)
        self.pos = match.start() if match else len(self.source)

    def peek(self) -> str:
        """Next character, or "" at end of input."""
        return self.source[self.pos:self.pos + 1]

    def rest(self) -> str:
        return self.source[self.pos:]

    @staticmethod
    def read_number(digits: str, start: int) -> int:
        try:
            return int(digits)
        except ValueError as e:
            # int() refuses numerals past sys.get_int_max_str_digits()
            raise EggSyntaxError(f"Number literal too long: {len(digits)} digits", start) from e

    def parse_expr(self) -> Expression:
        self.skip_space()
        start = self.pos
        expr: Expression

        if match := STRING_RE.match(self.source, start):
            expr = Literal(match.group(1), start)
        elif match := NUMBER_RE.match(self.source, start):
            expr = Literal(self.read_number(match.group(0), start), start)
        elif match := IDENTIFIER_RE.match(self.source, start):
            expr = Identifier(match.group(0), start)
        else:
            raise EggSyntaxError(f"Unexpected syntax: {self.rest() or EMPTY_INPUT}", start)

        self.pos = match.end()
        return self.parse_apply(expr)

    def parse_apply(self, expr: Expression) -> Expression:
        self.skip_space()
        while self.peek() == "(":
            start = expr.pos
            self.pos += 1
            self.skip_space()

            args: list[Expression] = []
            while self.peek() != ")":
                args.append(self.parse_expr())
                self.skip_space()
                if self.peek() == ",":
                    self.pos += 1
                    self.skip_space()
                elif self.peek() != ")":
                    raise EggSyntaxError("Expected ',' or ')'", self.pos)

            self.pos += 1  # consume ")"
            expr = Application(expr, tuple(args), start)
            self.skip_space()
        return expr


def parse(source: str) -> Expression:
    """Parse a complete Egg program into its root expression.

    Raises EggSyntaxError on malformed input or on text left over after the
    program's single top-level expression.
    """
    reader = Reader(source)
    expr = reader.parse_expr()
    reader.skip_space()
    if reader.pos < len(source):
        raise EggSyntaxError(f"Unexpected text after program: {reader.rest()}", reader.pos)
    logger.debug("Parsed program of %d chars", len(source))
    return expr
