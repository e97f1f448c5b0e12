"""
Runs one source unit through the scan → parse → evaluate pipeline.

Each call is self-contained: nothing is carried over between units.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from jlox.core.config import RunConfig
from jlox.core.errors import LoxError, ParseError, ScanError
from jlox.core.expression_lang.interpreter import Interpreter
from jlox.core.expression_lang.parser import parse
from jlox.core.expression_lang.printer import print_ast
from jlox.core.expression_lang.scanner import scan

logger = logging.getLogger(__name__)

# sysexits.h codes used by the file runner
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def run_source(
    source: str,
    config: RunConfig | None = None,
    echo: Callable[[str], object] = print,
) -> None:
    """Scan, parse, and evaluate (or print) one source unit.

    Args:
        source: Lox source text
        config: Run settings; ``print_ast`` echoes the tree instead of a value
        echo: Receives the single line of output

    Raises:
        ScanError, ParseError, LoxRuntimeError: First error of the failing stage.
        LoxError: If the input nests deeper than the Python stack allows.
    """
    config = config or RunConfig()

    try:
        tokens = scan(source)
        expr = parse(tokens)

        if config.print_ast:
            echo(print_ast(expr))
            return

        Interpreter(echo=echo).interpret(expr)
    except RecursionError as e:
        logger.debug("Recursion limit hit: %s", e)
        raise LoxError("Expression nested too deeply.") from e


def exit_code_for(error: LoxError) -> int:
    """Process exit status for a failed file run."""
    if isinstance(error, (ScanError, ParseError)):
        return EX_DATAERR
    return EX_SOFTWARE
