"""
Intermediate representation for the Lox front end: tokens, AST nodes and
runtime values.
"""

from jlox.core.ir.expressions import Binary, Expr, Grouping, Literal, Unary
from jlox.core.ir.tokens import KEYWORDS, STATEMENT_KEYWORDS, Token, TokenKind
from jlox.core.ir.values import Value, is_truthy, stringify, type_name

__all__ = [
    "KEYWORDS",
    "STATEMENT_KEYWORDS",
    "Binary",
    "Expr",
    "Grouping",
    "Literal",
    "Token",
    "TokenKind",
    "Unary",
    "Value",
    "is_truthy",
    "stringify",
    "type_name",
]
