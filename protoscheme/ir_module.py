"""Functions and modules: symbol tables over IR objects."""

from __future__ import annotations

from typing import Optional

from .ir import Object


class Function:
    """A named function with its arguments and local objects."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.local_objects: list[Object] = []
        self.arguments: list[Object] = []

    def add_local_object(self, obj: Object) -> None:
        self.local_objects.append(obj)

    def add_argument(self, obj: Object) -> None:
        self.arguments.append(obj)

    def __repr__(self) -> str:
        return f"Function({self.name!r})"


class Module:
    """Global objects and functions, looked up by symbol name.

    Adding a symbol that already exists rebinds the name; every added item is
    still kept in the module's lists in order of addition.
    """

    def __init__(self) -> None:
        self._objects: dict[str, Object] = {}
        self._functions: dict[str, Function] = {}
        self._all_global_objects: list[Object] = []
        self._all_functions: list[Function] = []

    def add_object(self, name: str, obj: Object) -> None:
        self._objects[name] = obj
        self._all_global_objects.append(obj)

    def add_function(self, name: str, function: Function) -> None:
        self._functions[name] = function
        self._all_functions.append(function)

    def get_object(self, name: str) -> Optional[Object]:
        """Return the object bound to name, or None."""
        return self._objects.get(name)

    def get_function(self, name: str) -> Optional[Function]:
        """Return the function bound to name, or None."""
        return self._functions.get(name)

    @property
    def all_global_objects(self) -> tuple[Object, ...]:
        return tuple(self._all_global_objects)

    @property
    def all_functions(self) -> tuple[Function, ...]:
        return tuple(self._all_functions)