"""prompt_toolkit lexer for live Mahou syntax highlighting in the REPL."""

from __future__ import annotations

from typing import Callable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer

from .lexer import tokenize
from .token_types import TT

# Map highlight groups → prompt_toolkit style strings.
GROUP_STYLE = {
    "keyword": "bold ansicyan",
    "number": "ansimagenta",
    "identifier": "",
    "operator": "",
    "sigil": "bold ansiyellow",
    "punctuation": "ansigray",
}

_TT_GROUP = {
    TT.SET: "keyword",
    TT.JUMP: "keyword",
    TT.PRINT: "keyword",
    TT.NUMBER: "number",
    TT.IDENT: "identifier",
    TT.PLUS: "operator",
    TT.MINUS: "operator",
    TT.STAR: "operator",
    TT.SLASH: "operator",
    TT.ASSIGN: "operator",
    TT.DOLLAR: "sigil",
    TT.SEMI: "punctuation",
}


def _highlight_line(text: str) -> StyleAndTextTuples:
    """Tokenize a single line and return styled fragments."""
    if not text:
        return [("", "")]

    result: StyleAndTextTuples = []
    pos = 0

    for tok in tokenize(text):
        # Columns are 1-based offsets into the line.
        start = tok.column - 1
        if start > pos:
            result.append(("", text[pos:start]))

        style = GROUP_STYLE.get(_TT_GROUP.get(tok.kind, ""), "")
        result.append((style, tok.text))
        pos = start + len(tok.text)

    # Trailing unstyled text.
    if pos < len(text):
        result.append(("", text[pos:]))

    return result if result else [("", text)]


class MahouLexer(Lexer):
    """prompt_toolkit Lexer that highlights Mahou source using the scanner."""

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = document.lines

        cache: dict[int, StyleAndTextTuples] = {}

        def get_line(lineno: int) -> StyleAndTextTuples:
            if lineno not in cache:
                if lineno < len(lines):
                    cache[lineno] = _highlight_line(lines[lineno])
                else:
                    cache[lineno] = [("", "")]

            return cache[lineno]

        return get_line
