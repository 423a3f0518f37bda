"""Evaluator of syntax trees against a chain of activations."""

from __future__ import annotations

from .activation import Activation
from .errors import InterpreterException
from .est import EstType, Function, SpecialForm
from .syntax import Char, Cons, Ident, Nil, Node, NodeType, Number, String, Vector, Visitor, as_node


def find_ident(activation: Activation, ident: Ident) -> Node:
    """Look the identifier up in activation and then in its ancestors."""
    current = activation
    while current is not None:
        if ident.id in current:
            return current[ident.id]
        current = current.parent
    raise InterpreterException("Ident was not defined!")


class Interpreter(Visitor[Node]):
    """Evaluates nodes; calls to functions run in a fresh child activation."""

    def __init__(self, activation: Activation) -> None:
        self.activation = activation

    def evaluate(self, node: Node) -> Node:
        return node.accept(self)

    def visit_nil(self, node: Nil) -> Node:
        return node

    def visit_cons(self, node: Cons) -> Node:
        if node.car.type == NodeType.IDENT:
            var = self.evaluate(node.car)
            if var.type == EstType.FUNCTION:
                function = as_node(var, Function)
                self.push_activation()
                try:
                    return function.call(node.cdr, self)
                finally:
                    self.pop_activation()
            if var.type == EstType.SPECIAL_FORM:
                return as_node(var, SpecialForm).apply(node.cdr, self)
            return Cons(var, self.evaluate(node.cdr))
        return Cons(self.evaluate(node.car), self.evaluate(node.cdr))

    def visit_number(self, node: Number) -> Node:
        return node

    def visit_string(self, node: String) -> Node:
        return node

    def visit_ident(self, node: Ident) -> Node:
        return find_ident(self.activation, node)

    def visit_char(self, node: Char) -> Node:
        raise InterpreterException("characters cannot be evaluated yet")

    def visit_vector(self, node: Vector) -> Node:
        raise InterpreterException("vectors cannot be evaluated yet")

    def push_activation(self) -> None:
        """Enter a new activation whose parent is the current one."""
        self.activation = Activation(self.activation)

    def pop_activation(self) -> None:
        """Return to the parent activation; the bottom one cannot be left."""
        if not self.activation.has_parent():
            raise InterpreterException("no parent activation")
        self.activation = self.activation.parent