from __future__ import annotations
from typing import Optional

from egg.types.scope import Scope
from egg.builtin.env_builtin import register

# NOTE: The root scope is process-global. If threading is introduced,
# callers sharing it must serialize access themselves.
_root_scope: Optional[Scope] = None


def get_root_scope() -> Scope:
    """Return the root scope, building it with the builtins on first use."""
    global _root_scope
    if _root_scope is None:
        scope = Scope()
        register(scope)
        _root_scope = scope
    return _root_scope


def new_program_scope() -> Scope:
    """A fresh top-level scope for one program; writes never reach the root."""
    return Scope(outer=get_root_scope())
