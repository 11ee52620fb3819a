import pytest

from lispi.errors import LispiInvalidSymbol, LispiUnboundSymbol
from lispi.types.environment import Environment
from lispi.types.symbol import Symbol

x = Symbol("x")
y = Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1)
    assert env.lookup(x) == 1


def test_redefine_last_write_wins():
    env = Environment()
    env.define(x, 1)
    env.define(x, 2)
    assert env.lookup(x) == 2


def test_lookup_walks_the_parent_chain():
    root = Environment()
    root.define(x, 1)
    grandchild = root.child().child()
    assert grandchild.lookup(x) == 1
    assert grandchild.find(x) is root
    assert grandchild.outer.outer is root


def test_child_shadows_without_touching_parent():
    root = Environment()
    root.define(x, 1)
    child = root.child()
    child.define(x, 2)
    assert child.lookup(x) == 2
    assert root.lookup(x) == 1


def test_define_never_reaches_parent_frames():
    root = Environment()
    child = root.child()
    child.define(y, 5)
    assert child.find(y) is child
    assert root.find(y) is None
    with pytest.raises(LispiUnboundSymbol):
        root.lookup(y)


def test_children_share_one_parent():
    root = Environment()
    a = root.child()
    b = root.child()
    a.define(x, "a")
    b.define(x, "b")
    root.define(y, "shared")
    assert (a.lookup(x), b.lookup(x)) == ("a", "b")
    assert a.lookup(y) == b.lookup(y) == "shared"


def test_unbound_symbol():
    with pytest.raises(LispiUnboundSymbol):
        Environment().lookup(Symbol("missing"))


@pytest.mark.parametrize("bad_name", ["x", 1, None])
def test_define_requires_a_symbol(bad_name):
    with pytest.raises(LispiInvalidSymbol):
        Environment().define(bad_name, 1)


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
