"""
jlox - scanner, parser, and tree-walking interpreter for Lox expressions.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import LoxError, LoxRuntimeError, ParseError, ScanError
from .core.expression_lang import evaluate, parse, parse_source, print_ast, scan

__version__ = get_version()

__all__ = [
    "__version__",
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    "ScanError",
    "evaluate",
    "parse",
    "parse_source",
    "print_ast",
    "scan",
]
