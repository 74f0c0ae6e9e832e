"""
Statement grouper for Mahou

Splits a flat token list into statements closed by the terminator and tags
each one by its leading keyword. There is no expression parsing: a statement
is a flat run of tokens.

Output is a list of Lark trees so the renderer can be a plain Transformer:
- setstmt:   set NAME = VALUE ;
- printstmt: print OPERAND ... ;
- rawstmt:   anything else, passed through verbatim
"""

from typing import List, Optional, Sequence

from lark import Token, Tree
from typing_extensions import TypeAlias

from .token_types import TT, Tok
from .utils import get_logger

logger = get_logger(__name__)

Statement: TypeAlias = List[Tok]

# ============================================================================
# Errors
# ============================================================================

class GroupError(Exception):
    """Malformed statement with position info"""
    def __init__(self, message: str, token: Optional[Tok] = None, index: Optional[int] = None):
        self.message = message
        self.token = token
        self.index = index
        self.line = token.line if token else None
        self.column = token.column if token else None
        super().__init__(
            f"{message} at line {token.line}, col {token.column}" if token else message
        )

# ============================================================================
# Shape checks
# ============================================================================

_SET_VALUE = (TT.NUMBER, TT.IDENT)


def _is_set_shape(stmt: Statement) -> bool:
    match [tok.kind for tok in stmt]:
        case [TT.SET, TT.IDENT, TT.ASSIGN, value, TT.SEMI] if value in _SET_VALUE:
            return True
        case _:
            return False


def _is_print_shape(stmt: Statement) -> bool:
    match [tok.kind for tok in stmt]:
        case [TT.PRINT, operand, *_, TT.SEMI] if operand != TT.SEMI:
            return True
        case _:
            return False


def _to_lark(tok: Tok) -> Token:
    return Token(tok.kind.name, tok.text, line=tok.line, column=tok.column)

# ============================================================================
# Grouper
# ============================================================================

class Grouper:
    """
    Accumulates tokens until a terminator, then closes the statement.

    Malformed set/print statements raise GroupError, or are logged and
    dropped when skip_malformed is set. Tokens after the last terminator
    never form a statement.
    """

    def __init__(self, tokens: Sequence[Tok], skip_malformed: bool = False):
        self.tokens = tokens
        self.skip_malformed = skip_malformed
        self.current: Statement = []
        self.count = 0
        self.statements: List[Tree] = []

    def group(self) -> List[Tree]:
        for tok in self.tokens:
            self.current.append(tok)
            if tok.kind == TT.SEMI:
                self.close()

        if self.current:
            logger.debug("dropping %d unterminated trailing tokens", len(self.current))
            self.current = []

        logger.debug("grouped %d statements", len(self.statements))
        return self.statements

    def close(self):
        stmt = self.current
        index = self.count
        self.current = []
        self.count += 1

        try:
            tree = self.classify(stmt, index)
        except GroupError as exc:
            if not self.skip_malformed:
                raise
            logger.warning("skipping %s", exc)
            return

        self.statements.append(tree)

    def classify(self, stmt: Statement, index: int) -> Tree:
        head = stmt[0]
        children = [_to_lark(tok) for tok in stmt]

        if head.kind == TT.SET:
            if not _is_set_shape(stmt):
                raise GroupError(f"malformed set statement (statement {index})", head, index)
            return Tree('setstmt', children)

        if head.kind == TT.PRINT:
            if not _is_print_shape(stmt):
                raise GroupError(f"malformed print statement (statement {index})", head, index)
            return Tree('printstmt', children)

        return Tree('rawstmt', children)


def group_statements(tokens: Sequence[Tok], skip_malformed: bool = False) -> List[Tree]:
    """Group a token list into statement trees"""
    return Grouper(tokens, skip_malformed=skip_malformed).group()
