"""
Expression AST for the Lox expression front end.

A closed set of four frozen node types. Each node owns its children
outright; trees are built once by the parser and only ever read afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from jlox.core.ir.tokens import Token

# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A number, string, true, false or nil token."""

    token: Token = Field(description="Literal-bearing or keyword-literal token")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.token.lexeme


class Grouping(BaseModel):
    """Parenthesized sub-expression: ( expression )."""

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.expression})"


class Unary(BaseModel):
    """Prefix operation: - operand or ! operand."""

    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.operator.lexeme}{self.right}"


class Binary(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.left} {self.operator.lexeme} {self.right}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Grouping | Unary | Binary

# Rebuild models for recursive forward references
Grouping.model_rebuild()
Unary.model_rebuild()
Binary.model_rebuild()
