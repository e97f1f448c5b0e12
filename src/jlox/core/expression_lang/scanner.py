"""
Scanner for the Lox expression language.

Converts source text into a sequence of tokens terminated by a single EOF
token. The first lexical error aborts the whole scan; no partial token list
is ever returned.
"""

from __future__ import annotations

import logging
import re

from jlox.core.errors import make_scan_error
from jlox.core.ir.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

# Digits, then a fraction only when the '.' is followed by a digit
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
# Identifier: ASCII letter or underscore followed by ASCII alphanumerics/underscores
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# c -> (kind without trailing '=', kind with trailing '=')
_MAYBE_EQUAL: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


class Scanner:
    """Single forward pass over the source with one and two character lookahead."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source.

        Raises:
            ScanError: On the first unexpected character or unterminated string.
        """
        while not self.is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(kind=TokenKind.EOF, lexeme="", line=self.line))
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    # -- Cursor --

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    # -- Lexemes --

    def _scan_token(self) -> None:
        c = self.advance()

        if c in _SINGLE_CHAR:
            self._add_token(_SINGLE_CHAR[c])
            return

        if c in _MAYBE_EQUAL:
            short, long = _MAYBE_EQUAL[c]
            self._add_token(long if self.match("=") else short)
            return

        if c == "/":
            if self.match("/"):
                # A comment goes until the end of the line
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if c in " \r\t":
            return

        if c == "\n":
            self.line += 1
            return

        if c == '"':
            self._string()
            return

        if m := _NUMBER_RE.match(self.source, self.start):
            self._number(m)
            return

        if m := _IDENT_RE.match(self.source, self.start):
            self._identifier(m)
            return

        raise make_scan_error(f"Unexpected character {c!r}.", self.line)

    def _string(self) -> None:
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            raise make_scan_error("Unterminated string.", self.line)

        # The closing "
        self.advance()

        # Trim the surrounding quotes
        value = self.source[self.start + 1 : self.current - 1]
        self._add_token(TokenKind.STRING, value)

    def _number(self, m: re.Match[str]) -> None:
        self.current = m.end()
        self._add_token(TokenKind.NUMBER, float(m.group(0)))

    def _identifier(self, m: re.Match[str]) -> None:
        self.current = m.end()
        text = m.group(0)
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind, literal: float | str | None = None) -> None:
        text = self.source[self.start : self.current]
        self.tokens.append(Token(kind=kind, lexeme=text, line=self.line, literal=literal))


def scan(source: str) -> list[Token]:
    """Scan source text into a list of tokens ending with EOF.

    Args:
        source: Lox source text (e.g., "1 + 2 * 3")

    Returns:
        Token list; the last element is always the EOF token.

    Raises:
        ScanError: If the source contains a lexical error.
    """
    return Scanner(source).scan_tokens()
