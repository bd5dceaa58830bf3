"""
Core module for the cvar_console package.

Provides the CVar Registry, its data models and value coercion.
"""

from cvar_console.core.datamodels import CVarDef, CVarEntry, CVarFlags, ValueType
from cvar_console.core.exceptions import (
    CVarError,
    CVarParseError,
    DuplicateRegistrationError,
    InvalidArityError,
    NotRegisteredError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from cvar_console.core.registry import CVarRegistry
from cvar_console.core.values import check_value, parse_value, render_value

__all__ = [
    # Registry
    "CVarRegistry",
    # Models
    "CVarDef",
    "CVarEntry",
    "CVarFlags",
    "ValueType",
    # Exceptions
    "CVarError",
    "CVarParseError",
    "DuplicateRegistrationError",
    "InvalidArityError",
    "NotRegisteredError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    # Values
    "check_value",
    "parse_value",
    "render_value",
]
