"""
Tree-walking interpreter for the Lox expression language.

Evaluates an expression AST to a runtime value. Pure evaluation: no
environment, no side effects beyond ``interpret`` echoing the result.
Operands are evaluated left to right and nothing short-circuits.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from jlox.core.errors import make_runtime_error
from jlox.core.ir.expressions import Binary, Expr, Grouping, Literal, Unary
from jlox.core.ir.tokens import Token, TokenKind
from jlox.core.ir.values import Value, is_truthy, stringify, type_name

logger = logging.getLogger(__name__)


class Interpreter:
    """Evaluates expression trees; implements ``ExprVisitor[Value]``."""

    def __init__(self, echo: Callable[[str], object] = print) -> None:
        self.echo = echo

    def interpret(self, expr: Expr) -> Value:
        """Evaluate ``expr`` and echo its display form.

        Raises:
            LoxRuntimeError: If evaluation fails.
        """
        value = self.visit_expression(expr)
        logger.debug("Evaluated to %s value %r", type_name(value), value)
        self.echo(stringify(value))
        return value

    def visit_expression(self, expr: Expr) -> Value:
        match expr:
            case Literal():
                return self._literal(expr.token)
            case Grouping():
                return self.visit_expression(expr.expression)
            case Unary():
                return self._unary(expr)
            case Binary():
                return self._binary(expr)
            case _:
                raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def _literal(self, token: Token) -> Value:
        match token.kind:
            case TokenKind.NUMBER:
                return float(token.literal)  # type: ignore[arg-type]
            case TokenKind.STRING:
                return str(token.literal)
            case TokenKind.TRUE:
                return True
            case TokenKind.FALSE:
                return False
            case TokenKind.NIL:
                return None
            case _:
                raise make_runtime_error("Unrecognized literal.", token)

    def _unary(self, expr: Unary) -> Value:
        right = self.visit_expression(expr.right)
        op = expr.operator

        if op.kind == TokenKind.BANG:
            return not is_truthy(right)

        if op.kind == TokenKind.MINUS:
            if _is_number(right):
                return -right  # type: ignore[operator]
            raise make_runtime_error("Operand must be a number.", op)

        raise make_runtime_error(f"Unsupported unary operator '{op.lexeme}'.", op)

    def _binary(self, expr: Binary) -> Value:
        left = self.visit_expression(expr.left)
        right = self.visit_expression(expr.right)
        op = expr.operator

        if _is_number(left) and _is_number(right):
            result = _number_op(op.kind, left, right)  # type: ignore[arg-type]
            if result is not None:
                return result

        elif isinstance(left, str) and isinstance(right, str):
            if op.kind == TokenKind.PLUS:
                return left + right

        elif left is None and right is None:
            if op.kind == TokenKind.EQUAL_EQUAL:
                return True
            if op.kind == TokenKind.BANG_EQUAL:
                return False

        elif isinstance(left, bool) and isinstance(right, bool):
            if op.kind == TokenKind.EQUAL_EQUAL:
                return left == right
            if op.kind == TokenKind.BANG_EQUAL:
                return left != right

        raise make_runtime_error(
            f"Unsupported operand types for '{op.lexeme}': "
            f"{type_name(left)} and {type_name(right)}.",
            op,
        )


def _is_number(value: Value) -> bool:
    return isinstance(value, float)


def _number_op(kind: TokenKind, left: float, right: float) -> Value:
    """Apply a numeric operator, or return None when ``kind`` is not one."""
    match kind:
        case TokenKind.PLUS:
            return left + right
        case TokenKind.MINUS:
            return left - right
        case TokenKind.STAR:
            return left * right
        case TokenKind.SLASH:
            return _divide(left, right)
        case TokenKind.GREATER:
            return left > right
        case TokenKind.GREATER_EQUAL:
            return left >= right
        case TokenKind.LESS:
            return left < right
        case TokenKind.LESS_EQUAL:
            return left <= right
        case TokenKind.EQUAL_EQUAL:
            return left == right
        case TokenKind.BANG_EQUAL:
            return left != right
        case _:
            return None


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def evaluate(expr: Expr) -> Value:
    """Evaluate an expression AST to a runtime value.

    Raises:
        LoxRuntimeError: If an operator is applied to unsupported operand types.
    """
    return Interpreter().visit_expression(expr)
