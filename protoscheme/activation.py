"""Activation records: name-to-value bindings chained to an enclosing record."""

from __future__ import annotations

from typing import Optional

from .syntax import Ident, Node


class Activation(dict):
    """Bindings of identifier names to values, with an optional parent."""

    def __init__(self, parent: Optional["Activation"] = None) -> None:
        super().__init__()
        self.parent = parent

    def add(self, ident: Ident, value: Node) -> None:
        """Bind the identifier's name to value in this record."""
        self[ident.id] = value

    def has_parent(self) -> bool:
        return self.parent is not None

    def __repr__(self) -> str:
        return f"Activation({dict.__repr__(self)}, parent={'yes' if self.parent is not None else 'no'})"