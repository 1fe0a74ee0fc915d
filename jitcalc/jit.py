"""
MCJIT execution of compiled calculator functions.
"""

import ctypes
import logging

import llvmlite.binding as llvm

from .compiler import CompiledExpression
from .errors import JitError

log = logging.getLogger(__name__)

llvm.initialize_native_target()
llvm.initialize_native_asmprinter()

# i64 calc_main(void), C calling convention
JitCalcFunc = ctypes.CFUNCTYPE(ctypes.c_int64)


class JitExecutor:
    def __init__(self):
        self.target = llvm.Target.from_default_triple()

    def execute(self, compiled: CompiledExpression) -> int:
        """JIT-compile ``compiled`` and call its entry point once.

        Every call gets its own target machine and engine. The engine takes
        ownership of both the machine and the module, and is closed before
        returning whatever the outcome. Symbols of a finalized object stay
        resolvable after ``remove_module``, so engines are never shared
        between lines.
        """
        target_machine = self.target.create_target_machine()
        try:
            engine = llvm.create_mcjit_compiler(compiled.module, target_machine)
        except RuntimeError as exc:
            compiled.module.close()
            target_machine.close()
            raise JitError(f"LLVM initialization failed: {exc}") from exc

        try:
            try:
                engine.finalize_object()
            except RuntimeError as exc:
                raise JitError(f"JIT compilation failed: {exc}") from exc

            addr = engine.get_function_address(compiled.function_name)
            if not addr:
                raise JitError(
                    f"JIT compilation failed: no entry point '{compiled.function_name}'")
            log.debug("%s resolved at 0x%x", compiled.function_name, addr)

            cfunc = JitCalcFunc(addr)
            return cfunc()
        finally:
            engine.close()
