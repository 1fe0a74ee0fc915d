import io
import sys

from jitcalc import JitError
from jitcalc.repl import evaluate, main, repl, startup_banner


def test_banner():
    assert startup_banner() == f"Jitcalc 0.1.0 on {sys.platform}"


def test_session_prints_results_and_errors(calc):
    stdin = io.StringIO("2 + 3 * 4\n\n5 / 0\n2 ^ 3\nquit\n1 + 1\n")
    stdout = io.StringIO()
    repl(calc, stdin, stdout)
    assert stdout.getvalue() == (
        startup_banner() + "\n"
        ">>> 14\n"
        ">>> "
        ">>> ZeroDivisionError: division by zero\n"
        ">>> SyntaxError: invalid trailing character '^'\n"
        ">>> "
    )


def test_exit_is_case_insensitive(calc):
    stdout = io.StringIO()
    repl(calc, io.StringIO("EXIT\n"), stdout)
    assert stdout.getvalue().endswith(">>> ")


def test_end_of_input_ends_session(calc):
    stdout = io.StringIO()
    repl(calc, io.StringIO("(1 + 1) * 21"), stdout)
    assert stdout.getvalue().endswith(">>> 42\n>>> \n")


def test_backend_error_is_reported_and_session_continues(calc, monkeypatch):
    def broken(compiled):
        raise JitError("JIT compilation failed: boom")

    out = io.StringIO()
    monkeypatch.setattr(calc, "execute", broken)
    assert not evaluate(calc, "1 + 1", out)
    monkeypatch.undo()
    assert evaluate(calc, "1 + 1", out)
    assert out.getvalue() == "RuntimeError: JIT compilation failed: boom\n2\n"


def test_emit_ir(calc):
    out = io.StringIO()
    assert evaluate(calc, "6 * 7", out, emit_ir=True)
    text = out.getvalue()
    assert "mul_tmp_0" in text
    assert text.endswith("42\n")


def test_main_command(capsys):
    assert main(["-c", "2 + 3 * 4"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_main_command_error(capsys):
    assert main(["-c", "(2 + 3"]) == 1
    assert capsys.readouterr().out == "SyntaxError: missing closing parenthesis ')'\n"


def test_interrupt_during_evaluation_ends_session(calc, monkeypatch):
    def interrupted(compiled):
        raise KeyboardInterrupt

    monkeypatch.setattr(calc, "execute", interrupted)
    stdout = io.StringIO()
    repl(calc, io.StringIO("1 + 1\n2 + 2\n"), stdout)
    assert stdout.getvalue() == startup_banner() + "\n>>> \n"
