"""
Wraps emitted instructions into a single nullary ``i64`` function.
"""

import logging

import llvmlite.binding as llvm
import llvmlite.ir as ir

from .errors import VerificationError

log = logging.getLogger(__name__)

FUNCTION_NAME = "calc_main"
I64 = ir.IntType(64)


class FunctionAssembler:
    """Owns the module, function and builder for one compilation."""

    def __init__(self, name: str = FUNCTION_NAME):
        self.name = name
        self.module = ir.Module(name="calculator")
        func_ty = ir.FunctionType(I64, [])
        self.function = ir.Function(self.module, func_ty, name=name)
        block = self.function.append_basic_block("entry")
        self.builder = ir.IRBuilder(block)

    def finish(self, value: ir.Value) -> llvm.ModuleRef:
        """Emit ``ret value`` and return the verified module."""
        self.builder.ret(value)
        text = str(self.module)
        log.debug("generated IR:\n%s", text)
        try:
            llvm_mod = llvm.parse_assembly(text)
        except RuntimeError as exc:
            raise VerificationError(f"invalid LLVM IR generated: {exc}") from exc
        try:
            llvm_mod.verify()
        except RuntimeError as exc:
            llvm_mod.close()
            raise VerificationError(f"invalid LLVM IR generated: {exc}") from exc
        return llvm_mod
