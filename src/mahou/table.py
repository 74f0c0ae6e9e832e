"""Plain-text token table, one row per token: kind, text, line:column."""

from __future__ import annotations

from typing import Sequence

from .token_types import Tok


def format_token(tok: Tok, width: int = 0) -> str:
    return f"{tok.kind.name:<{width}}\t{tok.text!r}\t{tok.line}:{tok.column}"


def format_tokens(tokens: Sequence[Tok]) -> str:
    if not tokens:
        return ""
    width = max(len(tok.kind.name) for tok in tokens)
    return "\n".join(format_token(tok, width) for tok in tokens)
