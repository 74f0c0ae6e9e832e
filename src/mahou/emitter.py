from __future__ import annotations

from pathlib import Path
from typing import Sequence


def emit(statements: Sequence[str]) -> str:
    """Join rendered statements into program text, one per line."""
    if not statements:
        return ""
    return "\n".join(statements) + "\n"


def write_program(statements: Sequence[str], path: str | Path) -> None:
    Path(path).write_text(emit(statements), encoding="utf-8")
