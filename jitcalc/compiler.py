"""
Recursive-descent compiler from arithmetic expressions to LLVM IR.

There is no syntax tree: every grammar level emits its instructions as soon
as it has recognised them and hands the resulting value back to its caller.

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '(' expression ')' | digit+
"""

import logging
import sys
from dataclasses import dataclass

import llvmlite.binding as llvm
import llvmlite.ir as ir

from .assembler import I64, FunctionAssembler
from .cursor import Cursor
from .errors import DivisionByZeroError, ExpressionSyntaxError, LiteralValueError

log = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1
VALID_CHARS = frozenset("0123456789+-*/()")
# three frames per parenthesis level, so roughly 2000 levels
NESTING_RECURSION_LIMIT = 6000


def is_valid_char(c: str) -> bool:
    return c in VALID_CHARS


@dataclass
class CompiledExpression:
    """A verified module holding one ``i64 ()`` function, ready for the JIT."""

    source: str
    function_name: str
    module: llvm.ModuleRef
    ir: str


class ExpressionCompiler:
    def __init__(self):
        self.tmp_counter = 0

    def reset(self) -> None:
        self.tmp_counter = 0

    def gen_tmp_name(self, prefix: str) -> str:
        name = f"{prefix}_{self.tmp_counter}"
        self.tmp_counter += 1
        return name

    def compile(self, source: str) -> CompiledExpression:
        """Compile one line into a verified module; nothing is executed."""
        self.reset()
        asm = FunctionAssembler()
        cursor = Cursor(source)
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(limit, NESTING_RECURSION_LIMIT))
        try:
            value = self.parse_expression(cursor, asm.builder)
        except RecursionError:
            raise ExpressionSyntaxError("too many nested parentheses") from None
        finally:
            sys.setrecursionlimit(limit)

        cursor.skip_whitespace()
        remaining = cursor.peek()
        if remaining is not None:
            if is_valid_char(remaining):
                raise ExpressionSyntaxError(
                    f"incomplete expression, trailing character '{remaining}'")
            raise ExpressionSyntaxError(f"invalid trailing character '{remaining}'")

        llvm_mod = asm.finish(value)
        log.debug("compiled %r using %d temporaries", source, self.tmp_counter)
        return CompiledExpression(source, asm.name, llvm_mod, str(asm.module))

    def parse_expression(self, cursor: Cursor, builder: ir.IRBuilder) -> ir.Value:
        value = self.parse_term(cursor, builder)
        while True:
            cursor.skip_whitespace()
            op = cursor.peek()
            if op == "+":
                cursor.advance()
                rhs = self.parse_term(cursor, builder)
                value = builder.add(value, rhs, name=self.gen_tmp_name("add_tmp"))
            elif op == "-":
                cursor.advance()
                rhs = self.parse_term(cursor, builder)
                value = builder.sub(value, rhs, name=self.gen_tmp_name("sub_tmp"))
            else:
                return value

    def parse_term(self, cursor: Cursor, builder: ir.IRBuilder) -> ir.Value:
        value = self.parse_factor(cursor, builder)
        while True:
            cursor.skip_whitespace()
            op = cursor.peek()
            if op == "*":
                cursor.advance()
                rhs = self.parse_factor(cursor, builder)
                value = builder.mul(value, rhs, name=self.gen_tmp_name("mul_tmp"))
            elif op == "/":
                cursor.advance()
                rhs = self.parse_factor(cursor, builder)
                # Only literal zeros are caught here; a divisor that evaluates
                # to zero at run time still reaches the udiv instruction.
                if isinstance(rhs, ir.Constant) and rhs.constant == 0:
                    raise DivisionByZeroError("division by zero")
                # udiv: negative dividends are read as unsigned 64-bit values.
                value = builder.udiv(value, rhs, name=self.gen_tmp_name("div_tmp"))
            else:
                return value

    def parse_factor(self, cursor: Cursor, builder: ir.IRBuilder) -> ir.Value:
        cursor.skip_whitespace()
        c = cursor.peek()
        if c is None:
            raise ExpressionSyntaxError("unexpected end of expression")

        if c == "(":
            cursor.advance()
            value = self.parse_expression(cursor, builder)
            cursor.skip_whitespace()
            if cursor.peek() != ")":
                raise ExpressionSyntaxError("missing closing parenthesis ')'")
            cursor.advance()
            cursor.skip_whitespace()
            return value

        if "0" <= c <= "9":
            digits = []
            while c is not None and "0" <= c <= "9":
                digits.append(cursor.advance())
                c = cursor.peek()
            literal = "".join(digits)
            significant = literal.lstrip("0") or "0"
            if len(significant) > len(str(INT64_MAX)) or int(significant) > INT64_MAX:
                raise LiteralValueError(
                    f"invalid literal for int() with base 10: '{literal}'")
            return ir.Constant(I64, int(significant))

        raise ExpressionSyntaxError(
            f"invalid character '{c}' (only 0-9, +, -, *, /, () are allowed)")
