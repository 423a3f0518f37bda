"""A small Scheme front end: AST dump reader, interpreter, and graph and IR structures."""

__version__ = "0.1.0"