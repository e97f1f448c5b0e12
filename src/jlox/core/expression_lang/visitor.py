"""
Traversal contract shared by every AST consumer.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from jlox.core.ir.expressions import Expr

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class ExprVisitor(Protocol[R_co]):
    """Computes a result from an expression tree.

    Implementations dispatch with an exhaustive ``match`` over the four node
    types and recurse into children through ``visit_expression``.
    """

    def visit_expression(self, expr: Expr) -> R_co:
        """Visit one node (and, transitively, its children)."""
        ...
