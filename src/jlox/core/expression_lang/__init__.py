"""
Lox expression front end.

Scanner, parser, interpreter, and debug printer for single expressions.

Usage:
    from jlox.core.expression_lang import parse_source, evaluate

    expr = parse_source("(2 + 3) * 4")
    result = evaluate(expr)
    # result == 20.0
"""

from jlox.core.expression_lang.interpreter import Interpreter, evaluate
from jlox.core.expression_lang.parser import Parser, parse, parse_source
from jlox.core.expression_lang.printer import AstPrinter, print_ast
from jlox.core.expression_lang.scanner import Scanner, scan
from jlox.core.expression_lang.visitor import ExprVisitor

__all__ = [
    "AstPrinter",
    "ExprVisitor",
    "Interpreter",
    "Parser",
    "Scanner",
    "evaluate",
    "parse",
    "parse_source",
    "print_ast",
    "scan",
]
