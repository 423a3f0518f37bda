"""Command line: evaluate a dump from a file, or dumps line by line from input."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from .activation import Activation
from .dump_reader import read_dump
from .errors import FrontendException
from .est import EstNode
from .interpreter import Interpreter
from .library import base_activation
from .syntax import DumpVisitor

_USAGE = (
    "Usage:\n"
    "  protoscheme expression_file.txt\n"
    "    - reading from a file\n"
    "  protoscheme\n"
    "    - reply mode\n"
)


def evaluate_text(text: str, activation: Activation) -> str:
    """Read one dump, evaluate it in activation and render the result."""
    result = Interpreter(activation).evaluate(read_dump(text))
    if isinstance(result, EstNode):
        return ""
    return DumpVisitor().dump(result)


def run_file(path: str, out: TextIO) -> None:
    """Evaluate the dump held in a file and write the result."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    out.write(f"> {evaluate_text(text, base_activation(with_define=False))}\n")


def repl(stream: Iterable[str], out: TextIO) -> None:
    """Evaluate each line as a dump, keeping definitions between lines."""
    activation = base_activation(with_define=True)
    for line in stream:
        text = line.rstrip("\n")
        out.write(f"> {evaluate_text(text, activation)}\n")
        out.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) == 1:
            run_file(args[0], sys.stdout)
        elif not args:
            repl(sys.stdin, sys.stdout)
        else:
            sys.stdout.write(_USAGE)
    except (FrontendException, TypeError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())