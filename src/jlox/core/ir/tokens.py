"""
Token model for the Lox expression front end.

A token is one classified lexeme: its kind, the exact source text it was
scanned from, the 1-based line it started on, and (for literals) the
already-converted literal value.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types produced by the scanner."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input
    EOF = auto()


KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

# Tokens that can open a statement; the parser's recovery routine stops here.
STATEMENT_KEYWORDS = frozenset(
    {
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)


class Token(BaseModel):
    """A single scanned token."""

    kind: TokenKind
    lexeme: str = Field(description="Exact source substring")
    line: int = Field(ge=1, description="1-based source line")
    literal: float | str | None = Field(
        default=None, description="Parsed value for NUMBER and STRING tokens"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF

    def __str__(self) -> str:
        return self.lexeme

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, line={self.line})"
