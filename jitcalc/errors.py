"""
Errors raised while compiling or running one calculator line.

Every class carries a ``label`` so the REPL can print errors the way the
Python interpreter does (``SyntaxError: ...``).
"""


class CalcError(Exception):
    label = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        return f"{self.label}: {self.message}"


class ExpressionSyntaxError(CalcError, SyntaxError):
    label = "SyntaxError"


class LiteralValueError(CalcError, ValueError):
    label = "ValueError"


class DivisionByZeroError(CalcError, ZeroDivisionError):
    label = "ZeroDivisionError"


class BackendError(CalcError, RuntimeError):
    """The generated code was rejected by LLVM; not caused by user input."""

    label = "RuntimeError"


class VerificationError(BackendError):
    pass


class JitError(BackendError):
    pass
