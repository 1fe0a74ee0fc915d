"""
jitcalc: an integer calculator that compiles each line to native code.
"""

__version__ = "0.1.0"

from .calculator import Calculator
from .compiler import CompiledExpression, ExpressionCompiler
from .cursor import Cursor
from .errors import (
    BackendError,
    CalcError,
    DivisionByZeroError,
    ExpressionSyntaxError,
    JitError,
    LiteralValueError,
    VerificationError,
)
from .jit import JitExecutor

__all__ = [
    "BackendError",
    "CalcError",
    "Calculator",
    "CompiledExpression",
    "Cursor",
    "DivisionByZeroError",
    "ExpressionCompiler",
    "ExpressionSyntaxError",
    "JitError",
    "JitExecutor",
    "LiteralValueError",
    "VerificationError",
]
