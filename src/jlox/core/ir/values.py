"""
Runtime values produced by the interpreter.

Values are plain Python objects: ``float`` for numbers, ``str`` for text,
``bool`` for booleans and ``None`` for nil.
"""

from __future__ import annotations

import math
from decimal import Decimal

Value = float | str | bool | None


def is_truthy(value: Value) -> bool:
    """Only ``false`` and ``nil`` are falsy; 0 and "" are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def type_name(value: Value) -> str:
    """Name of a value's runtime type, as used in error messages."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    return "string"


def stringify(value: Value) -> str:
    """Display form of a value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    return value


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    # shortest round-trip digits, always in positional notation
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
