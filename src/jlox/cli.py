"""
jlox command-line driver.

- no arguments: interactive prompt, one expression per line
- one argument: run a script file once
- more: usage error (exit 64)
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console

from jlox._version import get_version
from jlox.core.config import RunConfig
from jlox.core.errors import LoxError
from jlox.core.runner import EX_NOINPUT, EX_USAGE, exit_code_for, run_source

logger = logging.getLogger(__name__)

USAGE = "Usage: jlox [script]"

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"jlox version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="jlox – scan, parse, and evaluate Lox expressions",
    add_completion=False,
)


@app.command()
def main(
    script: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Script file to run (omit for the interactive prompt)",
        show_default=False,
    ),
    ast: bool = typer.Option(
        False,
        "--ast",
        help="Print the parsed tree instead of evaluating it",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log pipeline stages to stderr",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Run a Lox script, or start the interactive prompt."""
    args = script or []
    if len(args) > 1:
        typer.echo(USAGE)
        raise typer.Exit(code=EX_USAGE)

    config = RunConfig(print_ast=ast, verbose=verbose)
    _configure_logging(config)

    if args:
        run_file(Path(args[0]), config)
    else:
        run_prompt(config)


def _configure_logging(config: RunConfig) -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _report(error: LoxError) -> None:
    # markup off: "[line N]" must print verbatim
    err_console.print(str(error), markup=False, style="red")


def _echo(text: str) -> None:
    console.print(text, markup=False)


def run_file(path: Path, config: RunConfig) -> None:
    """Run a whole file as one source unit; any error ends the process."""
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        err_console.print(f"Could not read {path}: {e.strerror or e}", markup=False, style="red")
        raise typer.Exit(code=EX_NOINPUT)

    logger.debug("Running %s (%d chars)", path, len(source))
    try:
        run_source(source, config, echo=_echo)
    except LoxError as e:
        _report(e)
        raise typer.Exit(code=exit_code_for(e))


def run_prompt(config: RunConfig) -> None:
    """Read-eval-print loop. Errors are reported and the loop continues."""
    while True:
        try:
            line = console.input(config.prompt, markup=False, emoji=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        try:
            run_source(line, config, echo=_echo)
        except LoxError as e:
            _report(e)


if __name__ == "__main__":
    app()
