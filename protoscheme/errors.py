"""Exceptions raised by the front end: reader, interpreter and lowering."""


class FrontendException(Exception):
    """Base class for every lexer, parser and interpreter failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InterpreterException(FrontendException):
    """Raised when evaluation of an expression cannot proceed."""


class LoweringException(FrontendException):
    """Raised when lowering of the syntax tree fails."""