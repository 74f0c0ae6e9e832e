"""
Lexer for Mahou

Tokenizes Mahou source text into a flat list of tokens.

Features:
- Single pass, no backtracking
- Every symbol character is its own token
- Position tracking (line, absolute column)
- Never fails: unknown characters become identifier text
"""

from typing import List

from .token_types import TT, Tok
from .utils import get_logger

logger = get_logger(__name__)

# Characters that separate tokens. Newline also advances the line counter.
WHITESPACE = (' ', '\t', '\n')

# Boundary symbols: each one always forms a single-character token.
SYMBOLS = frozenset('+-*/><=;$')

DIGITS = frozenset('0123456789')

# Trailing pad so the final real token is closed by a whitespace boundary.
PADDING = '  '

# Exact-match classification table. '>' and '<' split tokens but are not
# listed, so they fall through to IDENT.
EXACT_KINDS = {
    '-': TT.MINUS,
    '+': TT.PLUS,
    '/': TT.SLASH,
    '*': TT.STAR,
    '=': TT.ASSIGN,
    '$': TT.DOLLAR,
    ';': TT.SEMI,
    'set': TT.SET,
    'jump': TT.JUMP,
    'print': TT.PRINT,
}

# ============================================================================
# Classification
# ============================================================================

def base_kind(text: str) -> TT:
    """Exact-match table lookup, IDENT for anything else"""
    return EXACT_KINDS.get(text, TT.IDENT)


def any_digit_promotes(text: str) -> bool:
    """An identifier holding any decimal digit is numeric (``a1`` included)"""
    return any(ch in DIGITS for ch in text)


def refine_kind(kind: TT, text: str) -> TT:
    if kind == TT.IDENT and any_digit_promotes(text):
        return TT.NUMBER
    return kind


def classify(text: str) -> TT:
    """Classify a non-empty token text. Total and position independent."""
    return refine_kind(base_kind(text), text)


def ends_token(cur: str, nxt: str) -> bool:
    """Boundary rule evaluated after ``cur`` joined the buffer"""
    if nxt in WHITESPACE:
        return True
    if cur in SYMBOLS:
        return True
    return nxt in SYMBOLS

# ============================================================================
# Lexer Implementation
# ============================================================================

def peek(source: str, index: int, offset: int = 0) -> str:
    """Character at ``index + offset``; a space outside the buffer"""
    idx = index + offset
    if 0 <= idx < len(source):
        return source[idx]
    return ' '


class Lexer:
    """
    Mahou lexer.

    Walks a padded copy of the source with a three-character window
    (previous, current, next) expressed as peek offsets -1, 0 and +1.
    Instances are single-use: build one per source text.
    """

    def __init__(self, source: str):
        self.source = source + PADDING
        self.index = 0
        self.line = 1
        self.buffer = ''
        self.tokens: List[Tok] = []

    # ========================================================================
    # Main Tokenization
    # ========================================================================

    def tokenize(self) -> List[Tok]:
        """Tokenize entire source, return token list"""
        while self.index < len(self.source):
            self.scan_char()
            self.index += 1

        logger.debug("scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def scan_char(self):
        """Consume the current character, emitting a token on a boundary"""
        cur = self.peek()

        if cur == '\n':
            self.line += 1
            return

        if cur in WHITESPACE:
            return

        self.buffer += cur
        if ends_token(cur, self.peek(1)):
            self.emit()

    # ========================================================================
    # Utilities
    # ========================================================================

    def peek(self, offset: int = 0) -> str:
        """Look at the window around the current index"""
        return peek(self.source, self.index, offset)

    def emit(self):
        """Classify the buffered text and emit it as a token"""
        text = self.buffer
        # Absolute 1-based offset of the first buffered character.
        column = self.index - len(text) + 2
        self.tokens.append(Tok(text=text, kind=classify(text), line=self.line, column=column))
        self.buffer = ''


def tokenize(source: str) -> List[Tok]:
    """Convenience function to tokenize source"""
    return Lexer(source).tokenize()
