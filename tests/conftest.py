import pytest

from egg.runtime_context import new_program_scope


@pytest.fixture(autouse=True)
def _no_prelude(monkeypatch):
    # Keep a developer's EGG_PRELUDE_PATH from leaking into Interpreter() tests.
    monkeypatch.delenv("EGG_PRELUDE_PATH", raising=False)


@pytest.fixture
def scope():
    """Fresh program scope chained to the root scope with builtins loaded."""
    return new_program_scope()
