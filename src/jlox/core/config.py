"""
Run configuration for the jlox driver.

There is no configuration file; every setting comes from the command line.
"""

from dataclasses import dataclass

DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class RunConfig:
    """Settings for one jlox invocation."""

    print_ast: bool = False  # print the parsed tree instead of evaluating
    verbose: bool = False  # DEBUG logging on stderr
    prompt: str = DEFAULT_PROMPT
