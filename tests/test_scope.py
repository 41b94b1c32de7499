import pytest

from egg.errors import EggUnboundSymbol
from egg.types.scope import Scope


@pytest.fixture
def chain():
    root = Scope()
    root.define("a", 1)
    middle = Scope(outer=root)
    middle.define("b", 2)
    leaf = Scope(outer=middle)
    return root, middle, leaf


def test_lookup_walks_outward(chain):
    root, middle, leaf = chain
    assert leaf.lookup("a") == 1
    assert leaf.lookup("b") == 2
    with pytest.raises(EggUnboundSymbol):
        middle.lookup("c")


def test_define_writes_current_frame_only(chain):
    root, middle, leaf = chain
    leaf.define("a", 100)
    assert leaf.lookup("a") == 100
    assert root.lookup("a") == 1
    assert "a" in leaf.vars
    assert "a" not in middle.vars


def test_find_returns_owning_scope(chain):
    root, middle, leaf = chain
    assert leaf.find("a") is root
    assert leaf.find("b") is middle
    assert leaf.find("zzz") is None


def test_contains_includes_inherited(chain):
    root, middle, leaf = chain
    assert "a" in leaf
    assert "b" not in root


def test_update_bulk_defines(chain):
    _, _, leaf = chain
    leaf.update({"x": 1, "y": 2})
    assert leaf.vars == {"x": 1, "y": 2}


def test_falsy_values_are_found():
    scope = Scope()
    scope.define("f", False)
    scope.define("zero", 0)
    assert scope.lookup("f") is False
    assert scope.lookup("zero") == 0


def test_string_forms(chain):
    root, _, leaf = chain
    assert str(root) == "{a: 1}"
    assert str(leaf) == "{} -> ..."
    assert repr(leaf) == "<Scope chain: {} -> {b: 2} -> {a: 1}>"
