"""
Recursive descent parser for the Lox expression language.

Grammar (precedence low to high):
    expression  → equality
    equality    → comparison (("!=" | "==") comparison)*
    comparison  → term ((">" | ">=" | "<" | "<=") term)*
    term        → factor (("-" | "+") factor)*
    factor      → unary (("/" | "*") unary)*
    unary       → ("!" | "-") unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from jlox.core.errors import make_parse_error
from jlox.core.expression_lang.scanner import scan
from jlox.core.ir.expressions import Binary, Expr, Grouping, Literal, Unary
from jlox.core.ir.tokens import STATEMENT_KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

# Combined depth of groupings and prefix operators; keeps recursion well
# inside the interpreter stack limit
MAX_NESTING = 64

_LITERAL_KINDS = frozenset(
    {
        TokenKind.FALSE,
        TokenKind.TRUE,
        TokenKind.NIL,
        TokenKind.NUMBER,
        TokenKind.STRING,
    }
)


class Parser:
    """Recursive descent parser over a token list ending in EOF."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or not tokens[-1].is_eof:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.current = 0
        self.depth = 0

    def parse(self) -> Expr:
        """Parse a single expression.

        Tokens after the expression are left unconsumed.

        Raises:
            ParseError: On the first syntax error.
        """
        expr = self.expression()
        logger.debug("Parsed expression ending at token %d of %d", self.current, len(self.tokens))
        return expr

    # -- Cursor --

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().is_eof

    def advance(self) -> Token:
        """Consume the current token and return it. EOF is never stepped past."""
        if not self.is_at_end():
            self.current += 1
            return self.previous()
        return self.peek()

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def match(self, *kinds: TokenKind) -> Token | None:
        for kind in kinds:
            if self.check(kind):
                return self.advance()
        return None

    # -- Grammar rules --

    def expression(self) -> Expr:
        return self.equality()

    def equality(self) -> Expr:
        """comparison (('!=' | '==') comparison)*"""
        expr = self.comparison()
        while operator := self.match(TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL):
            right = self.comparison()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def comparison(self) -> Expr:
        """term (('>' | '>=' | '<' | '<=') term)*"""
        expr = self.term()
        while operator := self.match(
            TokenKind.GREATER,
            TokenKind.GREATER_EQUAL,
            TokenKind.LESS,
            TokenKind.LESS_EQUAL,
        ):
            right = self.term()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def term(self) -> Expr:
        """factor (('-' | '+') factor)*"""
        expr = self.factor()
        while operator := self.match(TokenKind.MINUS, TokenKind.PLUS):
            right = self.factor()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def factor(self) -> Expr:
        """unary (('/' | '*') unary)*"""
        expr = self.unary()
        while operator := self.match(TokenKind.SLASH, TokenKind.STAR):
            right = self.unary()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def unary(self) -> Expr:
        """('!' | '-') unary | primary"""
        if operator := self.match(TokenKind.BANG, TokenKind.MINUS):
            with self._nested(operator):
                right = self.unary()
            return Unary(operator=operator, right=right)
        return self.primary()

    def primary(self) -> Expr:
        """literal | '(' expression ')'"""
        tok = self.peek()

        if tok.kind in _LITERAL_KINDS:
            self.advance()
            return Literal(token=tok)

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            with self._nested(tok):
                expr = self.expression()
            if not self.check(TokenKind.RIGHT_PAREN):
                raise make_parse_error("Expect ')' after expression.", self.peek())
            self.advance()
            return Grouping(expression=expr)

        if tok.is_eof:
            raise make_parse_error("Expect expression.", tok)

        raise make_parse_error("Unrecognized primary expression.", tok)

    @contextmanager
    def _nested(self, tok: Token) -> Iterator[None]:
        """Track one level of nesting opened by ``tok``."""
        if self.depth >= MAX_NESTING:
            raise make_parse_error("Too much nesting.", tok)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    # -- Error recovery --

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary.

        Not called while only expressions are parsed; statement parsing will
        use it to keep going after a ParseError.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind in STATEMENT_KEYWORDS:
                return
            self.advance()


def parse(tokens: list[Token]) -> Expr:
    """Parse a token list into an expression AST.

    Raises:
        ParseError: If the tokens do not form an expression.
    """
    return Parser(tokens).parse()


def parse_source(source: str) -> Expr:
    """Scan and parse a source string into an AST.

    Args:
        source: Expression string (e.g., "(1 + 2) * 3")

    Returns:
        Parsed expression AST.

    Raises:
        ScanError: If scanning fails.
        ParseError: If the expression is invalid.
    """
    return parse(scan(source))
