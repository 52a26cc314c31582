import io

import pytest

from rotten.cli import main, run, run_file, run_repl
from rotten.lexer import LexerError, LexerErrorMessage
from rotten.nodes import BinaryExpression, LiteralExpression
from rotten.parser import ParserError


def test_run_returns_tree():
    node = run("1 + 2")
    assert isinstance(node, BinaryExpression)
    assert node.left == LiteralExpression(1.0)
    assert node.right == LiteralExpression(2.0)


def test_run_lexer_error():
    with pytest.raises(LexerError) as info:
        run("@")
    assert info.value.message is LexerErrorMessage.UNEXPECTED_CHARACTER
    assert str(info.value) == "[1:2] Error: Unexpected character.\n@"


def test_run_parser_error():
    with pytest.raises(ParserError):
        run("(1")


def test_run_file(tmp_path):
    script = tmp_path / "script.rot"
    script.write_text("(1 + 2) * 3\n", encoding="utf-8")
    assert run_file(script) == run("(1 + 2) * 3\n")


def test_run_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_file(tmp_path / "missing.rot")


def test_repl_reports_errors_and_stops_at_exit():
    stdin = io.StringIO("1 + 2\n@\n.exit\n$\n")
    stdout = io.StringIO()
    run_repl(stdin, stdout)
    output = stdout.getvalue()
    assert output.startswith("Welcome to rotten v")
    assert "[1:2] Error: Unexpected character.\n@" in output
    assert "$" not in output
    assert output.count("> ") == 3


def test_repl_stops_at_end_of_input():
    stdout = io.StringIO()
    run_repl(io.StringIO("1\n"), stdout)
    assert stdout.getvalue().count("> ") == 2


def test_main_runs_script(tmp_path):
    script = tmp_path / "ok.rot"
    script.write_text("1 == 1", encoding="utf-8")
    assert main([str(script)]) == 0


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.rot"
    assert main([str(missing)]) == 1
    assert f"Couldn't open {missing}" in capsys.readouterr().err


def test_main_script_with_error(tmp_path, capsys):
    script = tmp_path / "bad.rot"
    script.write_text('"open', encoding="utf-8")
    assert main([str(script)]) == 1
    assert "Unterminated string." in capsys.readouterr().err


def test_main_without_script_starts_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(".exit\n"))
    assert main([]) == 0
    assert "Welcome to rotten v" in capsys.readouterr().out