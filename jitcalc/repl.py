"""
Interactive session in the style of the Python interpreter prompt.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .calculator import Calculator
from .errors import BackendError, CalcError

log = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMANDS = ("exit", "quit")


def startup_banner() -> str:
    name = __package__ or "jitcalc"
    return f"{name[:1].upper()}{name[1:]} {__version__} on {sys.platform}"


def evaluate(calc: Calculator, line: str, out: TextIO, emit_ir: bool = False) -> bool:
    """Run one line and print its result or error. Returns True on success."""
    calc.reset()
    try:
        compiled = calc.compile(line)
        if emit_ir:
            print(compiled.ir, file=out)
        result = calc.execute(compiled)
    except BackendError as exc:
        log.error("backend failure on %r", line, exc_info=True)
        print(exc.describe(), file=out)
        return False
    except CalcError as exc:
        print(exc.describe(), file=out)
        return False
    print(result, file=out)
    return True


def repl(calc: Calculator, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         emit_ir: bool = False) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(startup_banner(), file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            raw = stdin.readline()
            if not raw:
                print(file=stdout)
                break

            line = raw.strip()
            if not line:
                continue
            if line.lower() in EXIT_COMMANDS:
                break
            evaluate(calc, line, stdout, emit_ir)
        except KeyboardInterrupt:
            print(file=stdout)
            break


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jitcalc", description="Integer calculator that JIT-compiles every line with LLVM")
    p.add_argument("-c", "--command", metavar="EXPR", default=None,
                   help="Evaluate EXPR once and exit (status 1 on error)")
    p.add_argument("--emit-ir", action="store_true",
                   help="Print the verified LLVM IR before each result")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    calc = Calculator()
    if args.command is not None:
        return 0 if evaluate(calc, args.command, sys.stdout, args.emit_ir) else 1
    repl(calc, emit_ir=args.emit_ir)
    return 0
