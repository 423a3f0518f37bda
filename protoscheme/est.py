"""Nodes of the evaluation tree: functions, macros, special forms, ports, end of file."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Optional, TextIO

from .errors import InterpreterException
from .syntax import Node, NodeType

if TYPE_CHECKING:
    from .interpreter import Interpreter

_WHITESPACE = " \t\n\v\f\r"


class EstType(IntEnum):
    """Kinds of evaluation-tree nodes, numbered after the syntax tree kinds."""

    FUNCTION = int(NodeType.NEXT)
    MACROS = int(NodeType.NEXT) + 1
    SPECIAL_FORM = int(NodeType.NEXT) + 2
    PORT = int(NodeType.NEXT) + 3
    EOF_OBJECT = int(NodeType.NEXT) + 4


class EstNode(Node):
    """Base of evaluation-tree nodes; only visitors that know them can visit them."""

    def accept(self, visitor: Any) -> Any:
        method = getattr(visitor, self.visit_method, None)
        if method is None:
            raise TypeError(
                f"{type(visitor).__name__} cannot visit {type(self).__name__}"
            )
        return method(self)


class Function(EstNode):
    """A built-in procedure; its arguments reach it unevaluated with the interpreter."""

    node_type = EstType.FUNCTION
    visit_method = "visit_function"

    def __init__(self, func: Callable[[Node, "Interpreter"], Node]) -> None:
        self._func = func

    def call(self, args: Node, interpreter: "Interpreter") -> Node:
        return self._func(args, interpreter)

    def __repr__(self) -> str:
        return f"Function({self._func!r})"


class Macros(EstNode):
    """A syntax transformer applied to unevaluated arguments."""

    node_type = EstType.MACROS
    visit_method = "visit_macros"

    def __init__(self, func: Callable[[Node], Node]) -> None:
        self._func = func

    def apply(self, args: Node) -> Node:
        return self._func(args)

    def __repr__(self) -> str:
        return f"Macros({self._func!r})"


class SpecialForm(EstNode):
    """A form evaluated by its own rules, in the caller's activation."""

    node_type = EstType.SPECIAL_FORM
    visit_method = "visit_special_form"

    def __init__(self, func: Callable[[Node, "Interpreter"], Node]) -> None:
        self._func = func

    def apply(self, args: Node, interpreter: "Interpreter") -> Node:
        return self._func(args, interpreter)

    def __repr__(self) -> str:
        return f"SpecialForm({self._func!r})"


class Port(EstNode):
    """A character port over a text stream, readable, writable or both."""

    node_type = EstType.PORT
    visit_method = "visit_port"

    def __init__(
        self, stream: TextIO, readable: bool = False, writable: bool = False
    ) -> None:
        if not (readable or writable):
            raise ValueError("invalid set of flags")
        self._stream = stream
        self.readable = readable
        self.writable = writable
        self._file: Optional[TextIO] = None
        self._at_eof = False

    @classmethod
    def from_file(
        cls, filename: str, readable: bool = True, writable: bool = False
    ) -> "Port":
        """Open a file as a port; the port owns the file and close() closes it."""
        if readable and writable:
            mode = "r+"
        elif readable:
            mode = "r"
        elif writable:
            mode = "w"
        else:
            raise ValueError("invalid set of flags")
        handle = open(filename, mode, encoding="utf-8")
        port = cls(handle, readable, writable)
        port._file = handle
        return port

    def read_char(self) -> str:
        """Return the next non-whitespace character, or "" at the end of input."""
        if not self.readable:
            raise InterpreterException("incorrect type of port")
        while True:
            char = self._stream.read(1)
            if not char:
                self._at_eof = True
                return ""
            if char not in _WHITESPACE:
                return char

    def write_char(self, char: str) -> None:
        if not self.writable:
            raise InterpreterException("incorrect type of port")
        self._stream.write(char)

    def close(self) -> None:
        """Close the file the port opened; raises if there is none open."""
        if self._file is None or self._file.closed:
            raise InterpreterException("port is not open")
        self._file.close()

    def eof(self) -> bool:
        """Whether a read has reached the end of input."""
        return self._at_eof


class EOFObject(EstNode):
    """The value that marks the end of input."""

    node_type = EstType.EOF_OBJECT
    visit_method = "visit_eof_object"

    def __repr__(self) -> str:
        return "EOFObject()"