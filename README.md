# protoscheme

protoscheme is the front end of a small Scheme compiler. It contains:

- a reader for a compact text dump of the abstract syntax tree,
- a tree-walking interpreter with `+`, `-` and `define`,
- a directed graph with ordered node and edge lists,
- an intermediate representation made of objects, operands, operations and
  basic blocks, with modules and functions holding symbol tables,
- an intrusive two-way linked list.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## The dump format

An expression is either a pair or an atom:

```
EXPR -> ( EXPR . EXPR ) | ATOM
ATOM -> n[<number>] | "<string>" | id[<identifier>] | ()
```

Whitespace may appear between tokens. For example, `(+ 1 2)` is written as:

```
( id[+]. ( n[1]. ( n[2]. ())))
```

## Running the interpreter

Evaluate the expression stored in a file:

```
protoscheme expression.txt
```

The result is printed after `> `, so the example above prints `> 3`.

With no file argument it reads standard input line by line. Each line is read
as one dump expression and evaluated, and the result is printed after `> `.
In this mode `define` is also available, and definitions are kept from one
line to the next:

```
( id[define]. ( id[x]. ( n[5]. ())))
( id[+]. ( id[x]. ( n[1]. ())))
```

prints `> ()` and then `> 6`.

With more than one argument a usage message is printed. A malformed dump, an
undefined identifier or an unreadable file is reported on standard error as
`error: ...`, and the command exits with status 1.

## Using it as a library

```python
from protoscheme.cli import evaluate_text
from protoscheme.library import base_activation

print(evaluate_text("( id[-]. ( n[10]. ( n[4]. ())))", base_activation(False)))  # 6
```

`evaluate_text` returns the result rendered by `protoscheme.syntax.DumpVisitor`.
To parse without evaluating, use `protoscheme.dump_reader.read_dump`, or
`DumpReader` on any text stream; both return nodes from `protoscheme.syntax`
(`Cons`, `Nil`, `Number`, `String`, `Ident`, ...). They raise
`protoscheme.errors.FrontendException` when the input is not a single
well-formed dump. The interpreter (`protoscheme.interpreter.Interpreter`) raises
`InterpreterException` for an undefined identifier and for characters or
vectors, which it cannot evaluate.

Built-ins live in `protoscheme.library` (`plus`, `minus`, `define`,
`base_activation`). New ones can be bound in an `Activation` as
`protoscheme.est.Function` (called in a fresh child activation) or
`SpecialForm` (applied in the caller's activation).

Graphs are built with `protoscheme.graph.Graph`:

```python
from protoscheme.graph import Graph

g = Graph()
a, b = g.add_node(), g.add_node()
g.add_edge(a, b)
print([n.data for n in g.nodes()])   # [0, 1]
```

The IR classes are in `protoscheme.ir`. Operation names and their argument and
result counts come from the machine description in `protoscheme.mdes`:

```python
from protoscheme.ir import Object, Operation, OperandType
from protoscheme.mdes import ObjName, OperName

reg = Object()
reg.id = 1
reg.type = ObjName.REG

op = Operation(1)
op.name = OperName.MOV
op.set_arg_type(0, OperandType.IMM)
op.set_arg_imm(0, 10)
op.set_res_type(0, OperandType.OBJ)
op.set_res_obj(0, reg)
print(op)   # [1] MOV 10 -> v1
```

`protoscheme.ir_module` provides `Module` and `Function`,
`protoscheme.constant` provides `Constant`, `protoscheme.lexer` provides the
`Token` kinds and `IdentifiersTable`, and `protoscheme.intrusive_list` provides
`ListItem`.

## What it does not do

There is no reader for ordinary Scheme source text: the interpreter only takes
expressions in the dump format above. The `lexer` module defines token kinds
and an identifier table but no tokenizer. Only `+`, `-` and `define` are
built in, and nothing lowers the syntax tree into the IR.