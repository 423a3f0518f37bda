"""Dummy machine description: operation names and their operand counts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_RESS_NUM = 1
MAX_ARGS_NUM = 2


class ObjName(IntEnum):
    """Kind of an IR object."""

    REG = 0


class OperName(IntEnum):
    """Name of an IR operation."""

    MOV = 0
    ADD = 1
    SUB = 2
    MUL = 3


@dataclass(frozen=True)
class OperDes:
    """Description of one operation: its mnemonic and operand counts."""

    name: str
    num_args: int
    num_res: int


_DESCRIPTIONS = {
    OperName.MOV: OperDes("MOV", 1, 1),
    OperName.ADD: OperDes("ADD", 2, 1),
    OperName.SUB: OperDes("SUB", 2, 1),
    OperName.MUL: OperDes("MUL", 2, 1),
}


def oper_des(name: OperName) -> OperDes:
    """Return the description of an operation; raises ValueError for unknown names."""
    return _DESCRIPTIONS[OperName(name)]


def num_args(name: OperName) -> int:
    """Return the number of arguments the operation takes."""
    return oper_des(name).num_args


def num_results(name: OperName) -> int:
    """Return the number of results the operation produces."""
    return oper_des(name).num_res


def oper_name_string(name: OperName) -> str:
    """Return the mnemonic of the operation."""
    return oper_des(name).name