"""
Render rules turning statement trees into target-language lines.

The trees come from grouper.group_statements; children are Lark tokens, which
are str subclasses, so text joins directly.
"""

from __future__ import annotations

from typing import List, Sequence

from lark import Token, Transformer, Tree


class StatementRenderer(Transformer):
    """One render rule per statement label; ``program`` collects them."""

    def setstmt(self, children: List[Token]) -> str:
        name, value = children[1], children[3]
        return f"{name} = {value}"

    def printstmt(self, children: List[Token]) -> str:
        return f"print({children[1]})"

    def rawstmt(self, children: List[Token]) -> str:
        # Drop the terminator's text.
        return "".join(children)[:-1]

    def program(self, children: List[str]) -> List[str]:
        return list(children)


def render_statements(statements: Sequence[Tree]) -> List[str]:
    return StatementRenderer().transform(Tree("program", list(statements)))
