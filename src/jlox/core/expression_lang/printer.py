"""
Parenthesized debug rendering of expression trees.
"""

from __future__ import annotations

from jlox.core.ir.expressions import Binary, Expr, Grouping, Literal, Unary


class AstPrinter:
    """Renders expression trees; implements ``ExprVisitor[str]``."""

    def print(self, expr: Expr) -> str:
        return self.visit_expression(expr)

    def visit_expression(self, expr: Expr) -> str:
        match expr:
            case Literal():
                return f"(Literal {expr.token.lexeme})"
            case Grouping():
                return f"(Grouping {self.visit_expression(expr.expression)})"
            case Unary():
                return f"(Unary {expr.operator.lexeme} {self.visit_expression(expr.right)})"
            case Binary():
                left = self.visit_expression(expr.left)
                right = self.visit_expression(expr.right)
                return f"(Binary {expr.operator.lexeme} {left} {right})"
            case _:
                raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def print_ast(expr: Expr) -> str:
    """Render an expression tree as a parenthesized string."""
    return AstPrinter().print(expr)
