from protoscheme.activation import Activation
from protoscheme.syntax import Ident, Number


def test_bottom_activation_has_no_parent():
    act = Activation()
    assert act.has_parent() is False
    assert act.parent is None
    assert len(act) == 0


def test_child_refers_to_parent():
    parent = Activation()
    child = Activation(parent)
    assert child.has_parent() is True
    assert child.parent is parent


def test_add_binds_by_identifier_name():
    act = Activation()
    value = Number(1)
    act.add(Ident("x"), value)
    assert act["x"] is value
    assert list(act) == ["x"]


def test_add_rebinds_existing_name():
    act = Activation()
    act.add(Ident("x"), Number(1))
    act.add(Ident("x"), Number(2))
    assert act["x"] == Number(2)
    assert len(act) == 1


def test_bindings_are_not_shared_with_parent():
    parent = Activation()
    parent.add(Ident("x"), Number(1))
    child = Activation(parent)
    assert "x" not in child
    assert "x" in parent