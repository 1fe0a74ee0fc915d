"""
One-line calculator: compile, JIT, call.
"""

from .compiler import CompiledExpression, ExpressionCompiler
from .jit import JitExecutor


class Calculator:
    def __init__(self):
        self.compiler = ExpressionCompiler()
        self.executor = JitExecutor()

    def reset(self) -> None:
        self.compiler.reset()

    @property
    def tmp_counter(self) -> int:
        return self.compiler.tmp_counter

    def compile(self, line: str) -> CompiledExpression:
        return self.compiler.compile(line)

    def execute(self, compiled: CompiledExpression) -> int:
        return self.executor.execute(compiled)

    def run(self, line: str) -> int:
        """Evaluate ``line`` and return its signed 64-bit result.

        Raises a :class:`~jitcalc.errors.CalcError` subclass on any failure;
        nothing is executed unless the whole line compiled and verified.
        """
        return self.execute(self.compile(line))
