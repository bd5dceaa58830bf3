"""
Value coercion for CVars.

Three operations per ValueType, each a closed dispatch over the enum:

- check_value: validate a typed value from trusted code and return its
  stored form (raises TypeMismatchError)
- parse_value: turn user-supplied text into a typed value (raises
  CVarParseError)
- render_value: canonical string form, the inverse of parse_value
"""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np

from cvar_console.core.datamodels import ValueType
from cvar_console.core.exceptions import (
    CVarParseError,
    TypeMismatchError,
    UnsupportedTypeError,
)

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
_FLOAT_RE = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$",
    re.ASCII,
)
_FLOAT_WORDS = {"inf", "infinity", "nan"}


def as_value_type(value_type: Any) -> ValueType:
    """Resolve a ValueType member or its display name."""
    try:
        return ValueType(value_type)
    except ValueError:
        raise UnsupportedTypeError(value_type) from None


def _to_float32(value: float) -> float | None:
    """Round a double to binary32. Returns None if a finite value overflows."""
    with np.errstate(over="ignore"):
        narrowed = np.float32(value)
    if np.isinf(narrowed) and not math.isinf(value):
        return None
    return float(narrowed)


def _parse_int(text: str) -> int | None:
    if not _INT_RE.match(text):
        return None
    return int(text)


def _parse_float(text: str) -> float | None:
    stripped = text.strip()
    unsigned = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if unsigned.lower() in _FLOAT_WORDS:
        return float(stripped)
    if not _FLOAT_RE.match(stripped):
        return None
    number = float(stripped)
    # Literals past the double range come back as inf
    if math.isinf(number):
        return None
    return number


def check_value(value_type: ValueType, value: Any, name: str | None = None) -> Any:
    """Validate a typed value against a ValueType.

    Args:
        value_type: Type the value must satisfy.
        value: Value supplied by trusted code.
        name: CVar name, used in the error message only.

    Returns:
        The value as it will be stored (Float32 values are rounded to
        single precision).

    Raises:
        TypeMismatchError: If the value's dynamic type does not match.
        UnsupportedTypeError: If value_type is not a known ValueType.
    """
    if value_type is ValueType.BOOLEAN:
        if isinstance(value, bool):
            return value
    elif value_type is ValueType.INTEGER32:
        if isinstance(value, int) and not isinstance(value, bool):
            if INT32_MIN <= value <= INT32_MAX:
                return value
    elif value_type is ValueType.FLOAT32:
        if isinstance(value, (float, np.floating)):
            narrowed = _to_float32(float(value))
            if narrowed is not None:
                return narrowed
    elif value_type is ValueType.STRING:
        if isinstance(value, str):
            return value
    else:
        raise UnsupportedTypeError(value_type)

    raise TypeMismatchError(name, value_type, value)


def parse_value(value_type: ValueType, text: str) -> Any:
    """Parse user input into a value of the given type.

    Booleans accept "true"/"false" in any case, or the integers 0 and 1.
    Strings are taken verbatim.

    Raises:
        CVarParseError: If the text is not a valid literal for the type.
        UnsupportedTypeError: If value_type is not a known ValueType.
    """
    if value_type is ValueType.BOOLEAN:
        lowered = text.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        number = _parse_int(text)
        if number == 0:
            return False
        if number == 1:
            return True
    elif value_type is ValueType.STRING:
        return text
    elif value_type is ValueType.INTEGER32:
        number = _parse_int(text)
        if number is not None and INT32_MIN <= number <= INT32_MAX:
            return number
    elif value_type is ValueType.FLOAT32:
        number = _parse_float(text)
        if number is not None:
            narrowed = _to_float32(number)
            if narrowed is not None:
                return narrowed
    else:
        raise UnsupportedTypeError(value_type)

    raise CVarParseError(value_type, text)


def render_value(value_type: ValueType, value: Any) -> str:
    """Render a typed value in its canonical string form."""
    if value_type is ValueType.BOOLEAN:
        return "True" if value else "False"
    if value_type is ValueType.INTEGER32:
        return str(int(value))
    if value_type is ValueType.FLOAT32:
        # Shortest repr that round-trips through binary32
        return str(np.float32(value))
    if value_type is ValueType.STRING:
        return value
    raise UnsupportedTypeError(value_type)
