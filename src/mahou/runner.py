from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional, Sequence

from .emitter import emit, write_program
from .grouper import GroupError, group_statements
from .lexer import tokenize
from .render import render_statements
from .table import format_tokens
from .token_types import Tok
from .utils import debug_py_trace_enabled


class LoadError(Exception):
    """Input could not be read"""
    pass


def group(tokens: Sequence[Tok], skip_malformed: bool = False) -> List[str]:
    """Group tokens into statements and render each one."""
    return render_statements(group_statements(tokens, skip_malformed=skip_malformed))


def compile_source(src: str, skip_malformed: bool = False) -> List[str]:
    return group(tokenize(src), skip_malformed=skip_malformed)


def run(src: str, skip_malformed: bool = False) -> str:
    """Scan, group and emit; returns the program text."""
    return emit(compile_source(src, skip_malformed=skip_malformed))


def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Otherwise a path to a source file.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise LoadError("No input provided on stdin")
        return data

    candidate = Path(arg)
    if not candidate.is_file():
        raise LoadError(f"No such file: {arg}")

    return candidate.read_text(encoding="utf-8")


def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mahou", description="Scan and group Mahou source.")
    ap.add_argument("filename", nargs="?", help="input file, '-' or omitted for stdin")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--tokens", action="store_true", help="print the token table")
    ap.add_argument("--skip-malformed", action="store_true",
                    help="skip malformed statements instead of failing")
    ap.add_argument("-o", "--output", help="write emitted code to this file")
    ap.add_argument("--repl", action="store_true", help="start the interactive REPL")
    return ap


def _report(exc: Exception) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    if debug_py_trace_enabled():
        print("\nPython traceback:", file=sys.stderr)
        print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.repl:
        from .repl import repl

        repl(skip_malformed=args.skip_malformed)
        return 0

    try:
        source = _load_source(args.filename)
        tokens = tokenize(source)

        if args.tokens:
            table = format_tokens(tokens)
            if table:
                print(table)
            return 0

        statements = group(tokens, skip_malformed=args.skip_malformed)
    except (LoadError, GroupError) as exc:
        _report(exc)
        return 1

    if args.output:
        write_program(statements, args.output)
    else:
        sys.stdout.write(emit(statements))
    return 0


if __name__ == "__main__":
    sys.exit(main())
