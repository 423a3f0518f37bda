import pytest

from protoscheme.mdes import (
    MAX_ARGS_NUM,
    MAX_RESS_NUM,
    ObjName,
    OperDes,
    OperName,
    num_args,
    num_results,
    oper_des,
    oper_name_string,
)


@pytest.mark.parametrize(
    "name, text, args, results",
    [
        (OperName.MOV, "MOV", 1, 1),
        (OperName.ADD, "ADD", 2, 1),
        (OperName.SUB, "SUB", 2, 1),
        (OperName.MUL, "MUL", 2, 1),
    ],
)
def test_descriptions(name, text, args, results):
    assert oper_name_string(name) == text
    assert num_args(name) == args
    assert num_results(name) == results
    assert oper_des(name) == OperDes(text, args, results)


def test_counts_within_limits():
    for name in OperName:
        assert 0 < num_args(name) <= MAX_ARGS_NUM
        assert 0 < num_results(name) <= MAX_RESS_NUM


def test_mnemonic_matches_enum_member_name():
    for name in OperName:
        assert oper_name_string(name) == name.name


def test_integer_names_accepted():
    assert oper_name_string(int(OperName.ADD)) == oper_name_string(OperName.ADD)


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        oper_des(len(OperName))


def test_object_kind_order():
    assert ObjName(0) is ObjName.REG
    assert list(ObjName) == [ObjName.REG]
    with pytest.raises(ValueError):
        ObjName(1)