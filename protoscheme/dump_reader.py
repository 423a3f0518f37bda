"""Reader of the textual syntax tree dump.

The dump has this grammar, with whitespace allowed between tokens:

    EXPR -> ( EXPR . EXPR ) | ATOM
    ATOM -> n[<number>] | "<string>" | id[<id>] | ()

Example: ( id[add]. ( ( n[1]. ( n[2]. ( "abcd". ()))). ()))
"""

from __future__ import annotations

import re
from typing import Optional, TextIO

from .errors import FrontendException
from .syntax import Cons, Ident, Nil, Node, Number, String

_SPACES = " \t\n\v\f\r"
_REAL = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|(?i:nan|inf(?:inity)?))"
)
_ERROR = "Error while reading dump"


class _DumpParser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _fail(self) -> FrontendException:
        return FrontendException(_ERROR)

    def _skip(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _SPACES:
            self._pos += 1

    def _starts(self, prefix: str) -> bool:
        return self._text.startswith(prefix, self._pos)

    def _expect(self, literal: str) -> None:
        self._skip()
        if not self._starts(literal):
            raise self._fail()
        self._pos += len(literal)

    def parse(self) -> Node:
        # Each pending pair holds None while its car is read, then the car.
        pending: list[Optional[Node]] = []
        while True:
            self._skip()
            if self._starts("()"):
                self._pos += 2
                node: Node = Nil()
            elif self._starts("("):
                self._pos += 1
                pending.append(None)
                continue
            else:
                node = self._atom()

            while pending:
                car = pending[-1]
                if car is None:
                    self._expect(".")
                    pending[-1] = node
                    break
                self._expect(")")
                pending.pop()
                node = Cons(car, node)
            else:
                self._skip()
                if self._pos != len(self._text):
                    raise self._fail()
                return node

    def _atom(self) -> Node:
        if self._starts("n["):
            return self._number()
        if self._starts('"'):
            return self._string()
        if self._starts("id["):
            return self._ident()
        raise self._fail()

    def _number(self) -> Number:
        self._pos += 2
        self._skip()
        match = _REAL.match(self._text, self._pos)
        if match is None:
            raise self._fail()
        self._pos = match.end()
        self._expect("]")
        return Number(float(match.group()))

    def _string(self) -> String:
        start = self._pos + 1
        end = self._text.find('"', start)
        if end <= start:
            raise self._fail()
        self._pos = end + 1
        return String(self._text[start:end])

    def _ident(self) -> Ident:
        self._pos += 3
        chars: list[str] = []
        while True:
            self._skip()
            if self._pos >= len(self._text):
                raise self._fail()
            char = self._text[self._pos]
            if char == "]":
                break
            chars.append(char)
            self._pos += 1
        if not chars:
            raise self._fail()
        self._pos += 1
        return Ident("".join(chars))


def read_dump(text: str) -> Node:
    """Parse a whole dump; raises FrontendException unless all of text is one tree."""
    return _DumpParser(text).parse()


class DumpReader:
    """Reads one tree dump from the rest of a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read(self) -> Node:
        return read_dump(self._stream.read())