import pytest
from lark import Lark, Transformer, v_args

from jitcalc import Calculator, ExpressionCompiler

MASK64 = (1 << 64) - 1


def wrap_i64(n: int) -> int:
    n &= MASK64
    return n - (1 << 64) if n >> 63 else n


# Independent evaluator used as an oracle for the JIT results.
grammar = r"""
    ?start: expr

    ?expr: expr "+" term      -> add
         | expr "-" term      -> sub
         | term

    ?term: term "*" factor    -> mul
         | term "/" factor    -> div
         | factor

    ?factor: INT              -> number
           | "(" expr ")"

    INT: /[0-9]+/

    %import common.WS
    %ignore WS
"""

parser = Lark(grammar, parser="lalr")


@v_args(inline=True)
class ReferenceEvaluator(Transformer):
    def number(self, token):
        return int(token)

    def add(self, left, right):
        return wrap_i64(left + right)

    def sub(self, left, right):
        return wrap_i64(left - right)

    def mul(self, left, right):
        return wrap_i64(left * right)

    def div(self, left, right):
        # the compiled code divides the raw 64-bit patterns as unsigned
        return wrap_i64((left & MASK64) // (right & MASK64))


def reference_eval(source: str) -> int:
    return ReferenceEvaluator().transform(parser.parse(source))


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def compiler():
    return ExpressionCompiler()
