"""
Token Types for Mahou

Shared between the lexer, the statement grouper and the REPL highlighter.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TT(Enum):
    """Token Types - one per classification outcome"""

    # Literals
    NUMBER = auto()
    IDENT = auto()

    # Keywords
    SET = auto()
    JUMP = auto()
    PRINT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Assignment
    ASSIGN = auto()  # =

    # Punctuation
    DOLLAR = auto()  # $ variable sigil
    SEMI = auto()  # statement terminator

    @property
    def is_keyword(self) -> bool:
        return self in KEYWORD_TYPES


KEYWORD_TYPES = frozenset({TT.SET, TT.JUMP, TT.PRINT})


@dataclass(frozen=True)
class Tok:
    """Token with position info"""

    text: str
    kind: TT
    line: int = 1
    column: int = 1

    def __repr__(self):
        return f"Tok({self.kind.name}, {self.text!r}, {self.line}:{self.column})"
