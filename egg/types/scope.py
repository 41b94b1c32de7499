"""Runtime scopes for Egg.

A Scope stores bindings of names to evaluated values and links to a single
`outer` scope. Lookup walks the chain outward; define only ever writes into
the scope it is called on, so a program or function body can shadow a name
without touching the ancestor that already holds it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from egg import EggValue
from egg.errors import EggUnboundSymbol


class Scope:
    """Hierarchical mapping from binding names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Scope | None = outer

    def define(self, name: str, value: EggValue) -> None:
        """Create or overwrite `name` in this scope (never in an ancestor)."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def lookup(self, name: str) -> EggValue:
        """Return the value bound to `name`, searching outward.

        Raises EggUnboundSymbol if no scope in the chain binds it.
        """
        scope = self.find(name)
        if scope is None:
            raise EggUnboundSymbol(name)
        return scope.vars[name]

    def update(self, mapping: dict[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def chain(self) -> Iterator[Scope]:
        scope: Optional[Scope] = self
        while scope is not None:
            yield scope
            scope = scope.outer

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Scope chain: ")
            frames = []
            for scope in self.chain():
                with StringIO() as frame:
                    scope._write_vars(frame)
                    frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
