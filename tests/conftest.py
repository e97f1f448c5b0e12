"""Shared pytest fixtures for jlox tests."""

from pathlib import Path

import pytest

from jlox.core.ir.tokens import Token, TokenKind


@pytest.fixture
def script_file(tmp_path: Path):
    """Return a factory that writes a .lox script and returns its path."""

    def _write(source: str, name: str = "script.lox") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_token():
    """Return a factory for tokens on line 1."""

    def _make(kind: TokenKind, lexeme: str, literal: float | str | None = None, line: int = 1):
        return Token(kind=kind, lexeme=lexeme, line=line, literal=literal)

    return _make
