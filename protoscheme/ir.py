"""Intermediate representation: objects, operands, operations and basic blocks."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from .mdes import MAX_ARGS_NUM, MAX_RESS_NUM, ObjName, OperName, num_args, num_results, oper_name_string


class OperandType(IntEnum):
    """Kind of value an operand holds."""

    OBJ = 0
    IMM = 1
    TRG = 2


class Object:
    """An IR object such as a register; new objects are virtual with id -1."""

    def __init__(self) -> None:
        self.id = -1
        self._type: Optional[ObjName] = None
        self.is_virtual = True

    @property
    def type(self) -> Optional[ObjName]:
        return self._type

    @type.setter
    def type(self, value: ObjName) -> None:
        self._type = ObjName(value)

    def __str__(self) -> str:
        prefix = ""
        if self._type == ObjName.REG:
            prefix = "v" if self.is_virtual else "r"
        return f"{prefix}{self.id}"

    def __repr__(self) -> str:
        return f"Object(id={self.id!r}, type={self._type!r}, is_virtual={self.is_virtual!r})"


OperandValue = Union[int, Object, "Operation", None]


class Operand:
    """One argument or result of an operation; its type is unset until given."""

    def __init__(self) -> None:
        self._type: Optional[OperandType] = None
        self._value: OperandValue = None

    @property
    def type(self) -> Optional[OperandType]:
        return self._type

    @type.setter
    def type(self, value: OperandType) -> None:
        self._type = OperandType(value)

    def _require(self, expected: OperandType) -> None:
        if self._type != expected:
            raise ValueError(f"operand is of type {self._type!r}, not {expected!r}")

    @property
    def const_value(self) -> int:
        self._require(OperandType.IMM)
        return self._value  # type: ignore[return-value]

    @const_value.setter
    def const_value(self, value: int) -> None:
        self._require(OperandType.IMM)
        self._value = int(value)

    @property
    def object(self) -> Object:
        self._require(OperandType.OBJ)
        return self._value  # type: ignore[return-value]

    @object.setter
    def object(self, obj: Object) -> None:
        self._require(OperandType.OBJ)
        self._value = obj

    @property
    def target(self) -> "Operation":
        self._require(OperandType.TRG)
        return self._value  # type: ignore[return-value]

    @target.setter
    def target(self, operation: "Operation") -> None:
        self._require(OperandType.TRG)
        self._value = operation

    def __str__(self) -> str:
        if self._type is None:
            return "none"
        if self._type == OperandType.IMM:
            return str(self.const_value)
        if self._type == OperandType.OBJ:
            return str(self.object)
        return f"[{self.target.uid}]"


class Operation:
    """An operation with a fixed number of argument and result slots."""

    def __init__(self, uid: int) -> None:
        self._uid = uid
        self._name: Optional[OperName] = None
        self._args = [Operand() for _ in range(MAX_ARGS_NUM)]
        self._ress = [Operand() for _ in range(MAX_RESS_NUM)]
        self.basic_block: Optional[BasicBlock] = None

    @property
    def uid(self) -> int:
        return self._uid

    @property
    def name(self) -> Optional[OperName]:
        return self._name

    @name.setter
    def name(self, value: OperName) -> None:
        self._name = OperName(value)

    def num_args(self) -> int:
        """Number of arguments the operation's name calls for."""
        if self._name is None:
            raise ValueError("operation has no name")
        return num_args(self._name)

    def num_results(self) -> int:
        """Number of results the operation's name calls for."""
        if self._name is None:
            raise ValueError("operation has no name")
        return num_results(self._name)

    def arg(self, index: int) -> Operand:
        if not 0 <= index < MAX_ARGS_NUM:
            raise IndexError(f"argument index {index} out of range")
        return self._args[index]

    def res(self, index: int) -> Operand:
        if not 0 <= index < MAX_RESS_NUM:
            raise IndexError(f"result index {index} out of range")
        return self._ress[index]

    def _arg_slot(self, index: int) -> Operand:
        if not 0 <= index < self.num_args():
            raise IndexError(f"argument index {index} out of range")
        return self._args[index]

    def _res_slot(self, index: int) -> Operand:
        if not 0 <= index < self.num_results():
            raise IndexError(f"result index {index} out of range")
        return self._ress[index]

    def set_arg_type(self, index: int, operand_type: OperandType) -> None:
        self._arg_slot(index).type = operand_type

    def set_res_type(self, index: int, operand_type: OperandType) -> None:
        self._res_slot(index).type = operand_type

    def set_arg_obj(self, index: int, obj: Object) -> None:
        self._arg_slot(index).object = obj

    def set_arg_imm(self, index: int, value: int) -> None:
        self._arg_slot(index).const_value = value

    def set_arg_target(self, index: int, target: "Operation") -> None:
        self._arg_slot(index).target = target

    def set_res_obj(self, index: int, obj: Object) -> None:
        self._res_slot(index).object = obj

    def __str__(self) -> str:
        if self._name is None:
            return f"[{self._uid}] none "
        args = ", ".join(str(arg) for arg in self._args[: self.num_args()])
        ress = ", ".join(str(res) for res in self._ress[: self.num_results()])
        return f"[{self._uid}] {oper_name_string(self._name)} {args} -> {ress}"


class BasicBlock:
    """A straight-line sequence of operations with links to neighbouring blocks."""

    def __init__(self, uid: int) -> None:
        self._uid = uid
        self.prev: Optional[BasicBlock] = None
        self.next: Optional[BasicBlock] = None
        self.operations: list[Operation] = []

    @property
    def uid(self) -> int:
        return self._uid

    def add_operation(self, operation: Operation) -> None:
        self.operations.append(operation)

    def last_operation(self) -> Operation:
        """Return the most recently added operation."""
        if not self.operations:
            raise IndexError("basic block has no operations")
        return self.operations[-1]

    def __str__(self) -> str:
        return "\n".join([f"Basic Block [{self._uid}]", *map(str, self.operations)])