"""Command-line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from rotten.lexer import LexerError, scan
from rotten.nodes import Node
from rotten.parser import Parser, ParserError

VERSION = "0.1.0"


def run(source: str) -> Node:
    """Scan and parse ``source``, returning the parsed expression."""
    tokens = scan(source)
    return Parser(tokens).parse()


def run_file(path) -> Node:
    """Run the script at ``path``; OSError if it cannot be read."""
    content = Path(path).read_text(encoding="utf-8")
    return run(content)


def run_repl(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Read lines and run each until ``.exit`` or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    print(f"Welcome to rotten v{VERSION}", file=stdout)
    while True:
        print("> ", end="", file=stdout)
        stdout.flush()

        line = stdin.readline()
        if not line or line.strip() == ".exit":
            break

        try:
            run(line)
        except (LexerError, ParserError) as exc:
            print(exc, file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rotten", description="A rotten language trash interpreter"
    )
    parser.add_argument("--version", action="version", version=f"rotten {VERSION}")
    parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        help="Path to the .rot file to execute. When omitted the REPL will be started.",
    )
    args = parser.parse_args(argv)

    if args.script is None:
        run_repl()
        return 0

    try:
        run_file(args.script)
    except OSError as exc:
        print(f"Couldn't open {args.script}: {exc}", file=sys.stderr)
        return 1
    except (LexerError, ParserError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())