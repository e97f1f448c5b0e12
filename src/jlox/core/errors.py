"""
Error types for the Lox scanning, parsing, and evaluation stages.
"""

from __future__ import annotations

from dataclasses import dataclass

from jlox.core.ir.tokens import Token


class LoxError(Exception):
    """Base exception for all Lox pipeline errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return self.context.format(self.message)
        return self.message

    @property
    def line(self) -> int | None:
        return self.context.line if self.context else None


class ScanError(LoxError):
    """
    Raised when source text cannot be split into tokens.

    Examples:
    - Unexpected character
    - Unterminated string
    """

    pass


class ParseError(LoxError):
    """
    Raised when a token sequence is not a valid expression.

    Examples:
    - Missing closing parenthesis
    - Unrecognized primary token
    - Expression expected at end of input
    """

    def __init__(self, message: str, lexeme: str, context: ErrorContext | None = None):
        self.lexeme = lexeme
        super().__init__(message, context)


class LoxRuntimeError(LoxError):
    """
    Raised when evaluation of an expression fails.

    Examples:
    - Operand type mismatch for a unary or binary operator
    - Literal node holding a non-literal token
    """

    def __init__(self, message: str, token: Token, context: ErrorContext | None = None):
        self.token = token
        super().__init__(message, context)


@dataclass(frozen=True)
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        where: Position description such as "at end" or "at ')'"; empty when
            the error is not tied to a token
    """

    line: int
    where: str = ""

    def format(self, message: str) -> str:
        """
        Format a message with this location.

        Returns:
            String like: "[line 1] Error at ')': Expect expression."
        """
        return f"[line {self.line}] Error {self.where}: {message}"


def describe_location(token: Token) -> str:
    """Describe where a token sits, for error reports."""
    if token.is_eof:
        return "at end"
    return f"at '{token.lexeme}'"


def make_scan_error(message: str, line: int) -> ScanError:
    """
    Helper to create a ScanError with context.

    Args:
        message: Error description
        line: Line the scanner was on (1-indexed)

    Returns:
        ScanError with context attached
    """
    return ScanError(message, ErrorContext(line=line))


def make_parse_error(message: str, token: Token) -> ParseError:
    """
    Helper to create a ParseError located at the offending token.

    Args:
        message: Error description
        token: Token found where something else was expected

    Returns:
        ParseError carrying the token's lexeme and line
    """
    context = ErrorContext(line=token.line, where=describe_location(token))
    return ParseError(message, token.lexeme, context)


def make_runtime_error(message: str, token: Token) -> LoxRuntimeError:
    """
    Helper to create a LoxRuntimeError located at an operator or literal token.

    Args:
        message: Error description
        token: Operator (or literal) token of the failing node

    Returns:
        LoxRuntimeError with context attached
    """
    context = ErrorContext(line=token.line, where=describe_location(token))
    return LoxRuntimeError(message, token, context)
