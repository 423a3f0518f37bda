"""Lexer tokens and the table that numbers identifiers."""

from __future__ import annotations

from enum import IntEnum


class Token(IntEnum):
    """Kinds of lexical tokens."""

    ENDOFFILE = 0
    BOOLEAN = 1
    IDENTIFIER = 2
    STRING = 3
    NUMBER = 4
    QUOTE = 5
    DOT = 6
    CHARACTER = 7
    OPENVBRACKET = 8
    OPENBITVBRACKET = 9
    OPENBRACKET = 10
    CLOSEBRACKET = 11


class IdentifiersTable:
    """Gives each inserted identifier a new number, counting from 1."""

    def __init__(self) -> None:
        self._table: dict[int, str] = {}
        self._top = 1

    def insert(self, identifier: str) -> int:
        """Store identifier under a fresh number and return that number."""
        number = self._top
        self._table[number] = identifier
        self._top += 1
        return number

    def get_identifier(self, name: int) -> str:
        """Return the identifier stored under a number; KeyError if there is none."""
        return self._table[name]

    def __len__(self) -> int:
        return len(self._table)