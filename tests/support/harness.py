from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence, Tuple

BASE_DIR = Path(__file__).resolve().parent.parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from mahou.grouper import GroupError, group_statements
from mahou.lexer import tokenize
from mahou.render import render_statements
from mahou.runner import compile_source, main
from mahou.token_types import TT, Tok


def kinds_and_texts(source: str) -> List[Tuple[TT, str]]:
    """Scan *source* and return (kind, text) pairs."""
    return [(tok.kind, tok.text) for tok in tokenize(source)]


def statement_labels(source: str, skip_malformed: bool = False) -> List[str]:
    """Tree labels of the grouped statements of *source*."""
    return [tree.data for tree in group_statements(tokenize(source), skip_malformed=skip_malformed)]


def tok(text: str, kind: TT, line: int = 1, column: int = 1) -> Tok:
    return Tok(text=text, kind=kind, line=line, column=column)


def toks(*pairs: Tuple[str, TT]) -> List[Tok]:
    """Build a token list with running absolute columns, all on line 1."""
    out: List[Tok] = []
    column = 1
    for text, kind in pairs:
        out.append(tok(text, kind, column=column))
        column += len(text)
    return out


def run_cli(argv: Sequence[str]) -> int:
    return main(list(argv))


def render_source(source: str, skip_malformed: bool = False) -> List[str]:
    return render_statements(group_statements(tokenize(source), skip_malformed=skip_malformed))


__all__ = [
    "GroupError",
    "compile_source",
    "kinds_and_texts",
    "render_source",
    "run_cli",
    "statement_labels",
    "tok",
    "toks",
]
