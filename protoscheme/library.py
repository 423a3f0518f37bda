"""Built-in procedures and special forms of the interpreter."""

from __future__ import annotations

from typing import Iterator

from .activation import Activation
from .est import Function, SpecialForm
from .interpreter import Interpreter
from .syntax import Cons, Ident, Nil, Node, NodeType, Number, as_node


def _items(pair: Cons) -> Iterator[Node]:
    """Yield the cars of a list, stopping at the first cdr that is not a pair."""
    node: Node = pair
    while True:
        cons = as_node(node, Cons)
        yield cons.car
        if cons.cdr.type != NodeType.CONS:
            return
        node = cons.cdr


def plus(terms: Node, interpreter: Interpreter) -> Number:
    """Sum of the evaluated terms; zero when there are none."""
    if terms.type == NodeType.NIL:
        return Number(0)
    result = 0.0
    for term in _items(as_node(terms, Cons)):
        result += as_node(interpreter.evaluate(term), Number).value
    return Number(result)


def minus(terms: Node, interpreter: Interpreter) -> Number:
    """Negation of a single term, or the first term less the rest."""
    pair = as_node(terms, Cons)
    result = 0.0
    first = True
    node: Node = pair
    while True:
        cons = as_node(node, Cons)
        value = as_node(interpreter.evaluate(cons.car), Number).value
        if first and cons.cdr.type != NodeType.NIL:
            result += value
            first = False
        else:
            result -= value
        if cons.cdr.type != NodeType.CONS:
            break
        node = cons.cdr
    return Number(result)


def define(args: Node, interpreter: Interpreter) -> Nil:
    """Bind a name to the evaluated value in the current activation."""
    pair = as_node(args, Cons)
    ident = as_node(pair.car, Ident)
    evaluated = as_node(interpreter.evaluate(pair.cdr), Cons)
    interpreter.activation.add(ident, evaluated.car)
    return Nil()


def base_activation(with_define: bool = True) -> Activation:
    """Bottom activation holding "+", "-" and, if asked for, "define"."""
    activation = Activation()
    activation["+"] = Function(plus)
    activation["-"] = Function(minus)
    if with_define:
        activation["define"] = SpecialForm(define)
    return activation