"""Constant values held by the IR: integers, floating-point numbers or strings."""

from __future__ import annotations

from typing import Union

ConstantValue = Union[int, float, str]


class Constant:
    """An immutable constant of integer, floating-point or string kind."""

    __slots__ = ("_value",)

    def __init__(self, value: ConstantValue) -> None:
        if isinstance(value, bool):
            value = int(value)
        if not isinstance(value, (int, float, str)):
            raise TypeError(
                f"constant must be int, float or str, not {type(value).__name__}"
            )
        self._value = value

    @property
    def value(self) -> ConstantValue:
        return self._value

    def is_int(self) -> bool:
        return isinstance(self._value, int)

    def is_double(self) -> bool:
        return isinstance(self._value, float)

    def is_string(self) -> bool:
        return isinstance(self._value, str)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self._value), self._value))

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"