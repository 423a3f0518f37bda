"""Syntax tree nodes, the visitor protocol and a textual dump of trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Generic, Type, TypeVar

R = TypeVar("R")
N = TypeVar("N", bound="Node")


class NodeType(IntEnum):
    """Kinds of syntax tree nodes; NEXT is the first number free for other trees."""

    NIL = 0
    CONS = 1
    NUMBER = 2
    STRING = 3
    CHAR = 4
    VECTOR = 5
    IDENT = 6
    NEXT = 7


class Node:
    """Base of every tree node.

    Each subclass names its kind in node_type and the visitor method that
    handles it in visit_method.
    """

    node_type: ClassVar[int]
    visit_method: ClassVar[str]

    @property
    def type(self) -> int:
        return self.node_type

    def accept(self, visitor):
        """Dispatch to the visitor method for this kind of node and return its result."""
        return getattr(visitor, self.visit_method)(self)


@dataclass
class Ident(Node):
    """An identifier."""

    id: str

    node_type = NodeType.IDENT
    visit_method = "visit_ident"


@dataclass
class Nil(Node):
    """The empty list."""

    node_type = NodeType.NIL
    visit_method = "visit_nil"


@dataclass
class Cons(Node):
    """A pair of two nodes."""

    car: Node
    cdr: Node

    node_type = NodeType.CONS
    visit_method = "visit_cons"


@dataclass
class Number(Node):
    """A floating-point number."""

    value: float

    node_type = NodeType.NUMBER
    visit_method = "visit_number"

    def __post_init__(self) -> None:
        self.value = float(self.value)


@dataclass
class String(Node):
    """A string literal."""

    value: str

    node_type = NodeType.STRING
    visit_method = "visit_string"


@dataclass
class Char(Node):
    """A single character."""

    value: str

    node_type = NodeType.CHAR
    visit_method = "visit_char"

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"a character node holds one character, not {self.value!r}")


@dataclass
class Vector(Node):
    """A vector of nodes."""

    value: list[Node] = field(default_factory=list)

    node_type = NodeType.VECTOR
    visit_method = "visit_vector"


class Visitor(ABC, Generic[R]):
    """Operation over the syntax tree, one method per kind of node."""

    @abstractmethod
    def visit_nil(self, node: Nil) -> R:
        """Handle the empty list."""

    @abstractmethod
    def visit_cons(self, node: Cons) -> R:
        """Handle a pair."""

    @abstractmethod
    def visit_number(self, node: Number) -> R:
        """Handle a number."""

    @abstractmethod
    def visit_string(self, node: String) -> R:
        """Handle a string."""

    @abstractmethod
    def visit_char(self, node: Char) -> R:
        """Handle a character."""

    @abstractmethod
    def visit_vector(self, node: Vector) -> R:
        """Handle a vector."""

    @abstractmethod
    def visit_ident(self, node: Ident) -> R:
        """Handle an identifier."""


class DumpVisitor(Visitor[str]):
    """Render a tree as text; identifiers render as nothing."""

    def dump(self, node: Node) -> str:
        return node.accept(self)

    def visit_nil(self, node: Nil) -> str:
        return "()"

    def visit_cons(self, node: Cons) -> str:
        text = "(" + node.car.accept(self)
        if node.cdr.type != NodeType.NIL:
            text += " . " + node.cdr.accept(self)
        return text + ")"

    def visit_number(self, node: Number) -> str:
        return format(node.value, "g")

    def visit_string(self, node: String) -> str:
        return f'"{node.value}"'

    def visit_char(self, node: Char) -> str:
        return f"'{node.value}'"

    def visit_vector(self, node: Vector) -> str:
        return "[" + ", ".join(item.accept(self) for item in node.value) + "]"

    def visit_ident(self, node: Ident) -> str:
        return ""


def as_node(node: Node, cls: Type[N]) -> N:
    """Return node as an instance of cls, raising TypeError if it is of another kind."""
    if node.type == cls.node_type and isinstance(node, cls):
        return node
    raise TypeError(f"expected a {cls.__name__} node, got {type(node).__name__}")